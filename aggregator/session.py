"""Stateful search session: the view state a UI renders between requests."""

from __future__ import annotations

from enum import Enum
import logging
from typing import List, Optional

from models import EnrichedProfile, PaginationWindow, SearchQuery, total_pages
from utils.exceptions import BioSearchError

from .pagination import pagination_window
from .search_aggregator import ProfileSearchAggregator


logger = logging.getLogger(__name__)

IDLE_MESSAGE = "Enter a search term to find GitHub users"
LOADING_MESSAGE = "Loading..."
NO_RESULTS_MESSAGE = "No users found matching your search criteria."


class SearchStatus(str, Enum):
    """Mutually exclusive display states."""

    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    POPULATED = "populated"


class SearchSession:
    """Holds the current keyword/location and the last page shown."""

    def __init__(self, aggregator: ProfileSearchAggregator, keyword: str = "", location: str = "") -> None:
        self._aggregator = aggregator
        self.keyword = keyword
        self.location = location
        self.users: List[EnrichedProfile] = []
        self.total_count = 0
        self.current_page = 1
        self.status = SearchStatus.IDLE
        self.error: Optional[str] = None

    @property
    def total_pages(self) -> int:
        return total_pages(self.total_count)

    @property
    def message(self) -> Optional[str]:
        if self.status == SearchStatus.LOADING:
            return LOADING_MESSAGE
        if self.status == SearchStatus.ERROR:
            return self.error
        if self.status == SearchStatus.EMPTY:
            return NO_RESULTS_MESSAGE
        if self.status == SearchStatus.IDLE and not self.keyword.strip():
            return IDLE_MESSAGE
        return None

    def pagination(self) -> Optional[PaginationWindow]:
        """Page picker for the current page, None when everything fits on one page."""
        if self.status != SearchStatus.POPULATED or self.total_pages <= 1:
            return None
        return pagination_window(self.current_page, self.total_pages)

    def _clear(self) -> None:
        self.users = []
        self.total_count = 0

    async def search(self, page: int = 1) -> SearchStatus:
        """Run the search for *page*; a blank keyword is a no-op."""
        if not self.keyword.strip():
            return self.status
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")

        query = SearchQuery(keyword=self.keyword, location=self.location or None, page=page)
        self.status = SearchStatus.LOADING
        self.error = None

        try:
            result = await self._aggregator.search(query)
        except BioSearchError as exc:
            logger.error(f"Search error: {exc}")
            self._clear()
            self.error = f"Error: {exc.message}"
            self.status = SearchStatus.ERROR
            return self.status

        if result.no_results:
            self._clear()
            self.status = SearchStatus.EMPTY
            return self.status

        self.users = list(result.items)
        self.total_count = result.total_count
        self.current_page = result.current_page
        self.status = SearchStatus.POPULATED
        return self.status

    async def go_to_page(self, page: int) -> SearchStatus:
        if page < 1 or page > self.total_pages:
            raise ValueError(f"page {page} is outside 1..{self.total_pages}")
        return await self.search(page)
