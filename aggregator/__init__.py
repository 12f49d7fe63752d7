"""
Aggregator Module
"""
from .language import infer_dominant_language
from .enrichment import degraded_profile, enrich_profile
from .pagination import pagination_window, total_pages
from .search_aggregator import (
    ProfileSearchAggregator,
    build_aggregator,
    build_search_expression,
    search_profiles,
)
from .session import SearchSession, SearchStatus

__all__ = [
    "infer_dominant_language",
    "degraded_profile",
    "enrich_profile",
    "pagination_window",
    "total_pages",
    "ProfileSearchAggregator",
    "build_aggregator",
    "build_search_expression",
    "search_profiles",
    "SearchSession",
    "SearchStatus",
]
