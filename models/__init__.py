"""
Data Models
"""
from .schemas import (
    PAGE_SIZE,
    MAX_TOTAL_COUNT,
    REPO_SAMPLE_SIZE,
    ELLIPSIS,
    total_pages,
    SearchQuery,
    SearchHit,
    UserProfile,
    RepositorySummary,
    PeopleSearchResult,
    EnrichedProfile,
    SearchPage,
    PaginationWindow,
)

__all__ = [
    "PAGE_SIZE",
    "MAX_TOTAL_COUNT",
    "REPO_SAMPLE_SIZE",
    "ELLIPSIS",
    "total_pages",
    "SearchQuery",
    "SearchHit",
    "UserProfile",
    "RepositorySummary",
    "PeopleSearchResult",
    "EnrichedProfile",
    "SearchPage",
    "PaginationWindow",
]
