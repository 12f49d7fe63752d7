"""
Custom Exceptions
"""
from typing import Optional


class BioSearchError(Exception):
    """Base class for every error raised by the search pipeline"""

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(BioSearchError):
    """Missing or invalid configuration (e.g. no API token)"""
    pass


class InvalidQueryError(BioSearchError):
    """The query handed to the pipeline cannot be issued"""
    pass


class ProviderError(BioSearchError):
    """A call to an external provider failed"""

    def __init__(
        self,
        message: str,
        source: str = None,
        status_code: Optional[int] = None,
        **kwargs,
    ):
        super().__init__(message, kwargs)
        self.source = source
        self.status_code = status_code


class NotFoundError(ProviderError):
    """The requested resource does not exist"""
    pass


class AuthenticationError(ProviderError):
    """The provider rejected our credentials"""
    pass


class RateLimitError(ProviderError):
    """The provider quota is exhausted"""
    pass


class SearchError(BioSearchError):
    """The top-level people search failed"""

    def __init__(self, message: str, expression: str = None, **kwargs):
        super().__init__(message, kwargs)
        self.expression = expression
