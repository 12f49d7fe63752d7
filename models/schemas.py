"""
Data Models / Schemas
Shared data structures for people search
"""
from math import ceil
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


PAGE_SIZE = 10            # results per search page
MAX_TOTAL_COUNT = 1000    # the search API never reports beyond this
REPO_SAMPLE_SIZE = 10     # recent repositories used for language inference
ELLIPSIS = "…"


def total_pages(total_count: int, page_size: int = PAGE_SIZE) -> int:
    """Number of pages the search API can actually serve for *total_count*."""
    capped = min(max(0, int(total_count)), MAX_TOTAL_COUNT)
    return ceil(capped / page_size)


class SearchQuery(BaseModel):
    """A single people-search request"""
    keyword: str = Field(..., description="Free text matched against the bio")
    location: Optional[str] = Field(None, description="Optional location filter")
    page: int = Field(default=1, ge=1, description="1-based page number")

    @property
    def page_size(self) -> int:
        return PAGE_SIZE

    @property
    def is_blank(self) -> bool:
        return not self.keyword.strip()

    @property
    def location_filter(self) -> Optional[str]:
        """Location with surrounding whitespace removed, None when blank"""
        value = (self.location or "").strip()
        return value or None


class SearchHit(BaseModel):
    """Minimal profile stub returned by the people-search endpoint"""
    model_config = ConfigDict(frozen=True, extra="ignore")

    login: str = Field(..., description="Username")
    id: int = Field(..., description="Numeric account ID")
    avatar_url: str = Field(default="", description="Avatar image URL")
    html_url: str = Field(default="", description="Profile page URL")


class UserProfile(SearchHit):
    """Full profile record from the user endpoint"""
    name: Optional[str] = Field(None, description="Display name")
    bio: Optional[str] = Field(None, description="Biography")
    location: Optional[str] = Field(None, description="Free-text location")
    blog: Optional[str] = Field(None, description="Website")
    twitter_username: Optional[str] = Field(None, description="Twitter/X handle")
    followers: int = Field(default=0, description="Follower count")
    following: int = Field(default=0, description="Following count")
    company: Optional[str] = Field(None, description="Employer")


class RepositorySummary(BaseModel):
    """One entry of a user's repository listing"""
    model_config = ConfigDict(extra="ignore")

    name: str = Field(default="", description="Repository name")
    language: Optional[str] = Field(None, description="Primary language")


class PeopleSearchResult(BaseModel):
    """Raw response of the people-search endpoint"""
    items: List[SearchHit] = Field(default_factory=list)
    total_count: int = Field(default=0, ge=0)


class EnrichedProfile(UserProfile):
    """Search hit merged with profile details and the inferred language"""
    dominant_language: Optional[str] = Field(None, description="Most used language in recent repositories")

    @property
    def display_name(self) -> str:
        return self.name or self.login

    @classmethod
    def from_profile(cls, hit: SearchHit, profile: UserProfile, language: Optional[str]) -> "EnrichedProfile":
        """Merge a full profile with the inferred language, keeping the hit's identity"""
        details = profile.model_dump(exclude={"login", "id", "avatar_url", "html_url"})
        return cls(**hit.model_dump(), **details, dominant_language=language)

    @classmethod
    def degraded(cls, hit: SearchHit) -> "EnrichedProfile":
        """Best-effort stub built only from the originating hit"""
        return cls(**hit.model_dump(), name=hit.login)


class SearchPage(BaseModel):
    """One page of enriched results"""
    items: List[EnrichedProfile] = Field(default_factory=list, description="Profiles in ranking order")
    total_count: int = Field(default=0, ge=0, le=MAX_TOTAL_COUNT, description="Capped total match count")
    current_page: int = Field(default=1, ge=1)

    @property
    def no_results(self) -> bool:
        return not self.items

    @property
    def total_pages(self) -> int:
        return total_pages(self.total_count)

    @classmethod
    def empty(cls, page: int = 1) -> "SearchPage":
        return cls(items=[], total_count=0, current_page=page)


class PaginationWindow(BaseModel):
    """Page picker entries plus previous/next enablement"""
    entries: List[Union[int, str]] = Field(default_factory=list, description="Page numbers or ELLIPSIS markers")
    current_page: int
    total_pages: int
    has_previous: bool
    has_next: bool
