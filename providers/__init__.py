"""
Providers Module
"""
from .base import BaseProvider, SearchProvider, ProfileProvider, RepositoryLister
from .github_client import GitHubClient

__all__ = [
    "BaseProvider",
    "SearchProvider",
    "ProfileProvider",
    "RepositoryLister",
    "GitHubClient",
]
