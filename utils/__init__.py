"""
Utils Module
"""
from .logger import setup_logger
from .exceptions import (
    BioSearchError,
    ConfigurationError,
    InvalidQueryError,
    ProviderError,
    NotFoundError,
    AuthenticationError,
    RateLimitError,
    SearchError,
)

__all__ = [
    "setup_logger",
    "BioSearchError",
    "ConfigurationError",
    "InvalidQueryError",
    "ProviderError",
    "NotFoundError",
    "AuthenticationError",
    "RateLimitError",
    "SearchError",
]
