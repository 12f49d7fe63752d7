"""
Base Providers
Abstract collaborators consumed by the search pipeline
"""
from abc import ABC, abstractmethod
from typing import List

from models import REPO_SAMPLE_SIZE, PeopleSearchResult, RepositorySummary, UserProfile


class BaseProvider(ABC):
    """
    Common lifecycle for every provider
    Subclasses own their transport and release it in close()
    """

    @property
    def name(self) -> str:
        """Provider name used in log lines"""
        return type(self).__name__

    def is_configured(self) -> bool:
        """
        Whether the provider has the credentials it needs
        Subclasses override this to check API tokens
        """
        return True

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """Release transport resources"""
        return None


class SearchProvider(BaseProvider):
    """People search by free-text expression"""

    @abstractmethod
    async def search_people(self, expression: str, page: int, page_size: int) -> PeopleSearchResult:
        """
        Run one page of a people search

        Args:
            expression: search expression, e.g. "rust in:bio location:Berlin"
            page: 1-based page number
            page_size: results per page

        Returns:
            hits in ranking order plus the reported total
        """
        pass


class ProfileProvider(BaseProvider):
    """Full profile lookup"""

    @abstractmethod
    async def get_profile(self, username: str) -> UserProfile:
        pass


class RepositoryLister(BaseProvider):
    """Repository listing, most recently pushed first"""

    @abstractmethod
    async def list_recent_repositories(
        self,
        username: str,
        limit: int = REPO_SAMPLE_SIZE,
    ) -> List[RepositorySummary]:
        pass
