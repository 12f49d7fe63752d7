"""
Search Aggregator
Runs one page of a bio search and enriches every hit concurrently
"""
import asyncio
from typing import Optional
import logging

from config import Settings, get_settings
from models import MAX_TOTAL_COUNT, PAGE_SIZE, SearchPage, SearchQuery
from providers import GitHubClient
from providers.base import ProfileProvider, RepositoryLister, SearchProvider
from utils.exceptions import ConfigurationError, InvalidQueryError, SearchError

from .enrichment import enrich_profile


logger = logging.getLogger(__name__)

MISSING_TOKEN_MESSAGE = "GitHub token not configured. Please check environment variables."


def build_search_expression(keyword: str, location: Optional[str] = None) -> str:
    """
    Build the people-search expression

    "<keyword> in:bio", plus " location:<location>" when a location is given
    """
    expression = f"{keyword.strip()} in:bio"
    location = (location or "").strip()
    if location:
        expression += f" location:{location}"
    return expression


class ProfileSearchAggregator:
    """
    Search aggregator
    One search call, then one enrichment task per hit, joined in ranking order
    """

    def __init__(
        self,
        search_provider: SearchProvider,
        profile_provider: Optional[ProfileProvider] = None,
        repository_lister: Optional[RepositoryLister] = None,
    ):
        """
        Args:
            search_provider: runs the people search
            profile_provider: full profile lookups (defaults to search_provider)
            repository_lister: repository listings (defaults to profile_provider)
        """
        self._search_provider = search_provider
        self._profile_provider = profile_provider or search_provider
        self._repository_lister = repository_lister or self._profile_provider

    async def search(self, query: SearchQuery) -> SearchPage:
        """
        Fetch and enrich one page of results

        Args:
            query: keyword, optional location and page number

        Returns:
            enriched page; empty (no_results) when the search matched nothing

        Raises:
            InvalidQueryError: blank keyword, nothing was requested
            ConfigurationError: the search provider has no credentials
            SearchError: the search call itself failed
        """
        if query.is_blank:
            raise InvalidQueryError("Search keyword must not be blank")

        if not self._search_provider.is_configured():
            raise ConfigurationError(MISSING_TOKEN_MESSAGE, {"provider": self._search_provider.name})

        expression = build_search_expression(query.keyword, query.location_filter)

        try:
            result = await self._search_provider.search_people(
                expression,
                page=query.page,
                page_size=PAGE_SIZE,
            )
        except Exception as e:
            logger.error(f"Search failed for '{expression}': {e}")
            raise SearchError(str(e), expression=expression) from e

        if not result.items:
            logger.info(f"No users found for '{expression}'")
            return SearchPage.empty(query.page)

        # gather returns results positionally, so ranking order survives
        profiles = await asyncio.gather(
            *(
                enrich_profile(hit, self._profile_provider, self._repository_lister)
                for hit in result.items
            )
        )

        page = SearchPage(
            items=list(profiles),
            total_count=min(result.total_count, MAX_TOTAL_COUNT),
            current_page=query.page,
        )
        logger.info(
            f"Page {page.current_page} of '{expression}': {len(page.items)} users, "
            f"{page.total_count} total"
        )
        return page

    async def close(self):
        """Close every distinct provider"""
        seen = set()
        for provider in (self._search_provider, self._profile_provider, self._repository_lister):
            if id(provider) in seen:
                continue
            seen.add(id(provider))
            await provider.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


def build_aggregator(settings: Optional[Settings] = None) -> ProfileSearchAggregator:
    """Aggregator backed by a single GitHub client for all three lookups"""
    return ProfileSearchAggregator(GitHubClient(settings=settings or get_settings()))


async def search_profiles(
    keyword: str,
    location: Optional[str] = None,
    page: int = 1,
) -> SearchPage:
    """Convenience: one search with a throwaway GitHub client"""
    async with build_aggregator() as aggregator:
        return await aggregator.search(SearchQuery(keyword=keyword, location=location, page=page))
