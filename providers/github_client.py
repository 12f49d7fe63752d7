"""
GitHub Client
REST access to user search, user profiles and repository listings
"""
from typing import Any, Dict, List, Optional
import logging

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from config import Settings, get_settings
from models import (
    REPO_SAMPLE_SIZE,
    PeopleSearchResult,
    RepositorySummary,
    SearchHit,
    UserProfile,
)
from utils.exceptions import (
    AuthenticationError,
    NotFoundError,
    ProviderError,
    RateLimitError,
)

from .base import ProfileProvider, RepositoryLister, SearchProvider


logger = logging.getLogger(__name__)


class GitHubClient(SearchProvider, ProfileProvider, RepositoryLister):
    """
    GitHub REST client

    Implements every collaborator of the pipeline over one shared
    httpx.AsyncClient. Transport failures are retried; HTTP status
    failures are mapped to ProviderError subclasses and never retried.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        *,
        settings: Optional[Settings] = None,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        retry_delay: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        settings = settings or get_settings()
        self._github_settings = settings.github
        self._token = token if token is not None else self._github_settings.token
        self._api_url = (api_url or self._github_settings.api_url).rstrip("/")
        self._timeout = timeout if timeout is not None else settings.general.request_timeout
        self._max_retries = max(1, max_retries if max_retries is not None else settings.general.max_retries)
        self._retry_delay = retry_delay if retry_delay is not None else settings.general.retry_delay
        self._client = client

    @property
    def name(self) -> str:
        return "GitHub"

    def is_configured(self) -> bool:
        return bool(str(self._token or "").strip())

    def _headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {
            "Accept": "application/vnd.github+json",
            "User-Agent": self._github_settings.user_agent,
            "X-GitHub-Api-Version": self._github_settings.api_version,
        }
        if self.is_configured():
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _get_client(self) -> httpx.AsyncClient:
        """Create the HTTP client on first use"""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._api_url,
                headers=self._headers(),
                timeout=httpx.Timeout(self._timeout),
                follow_redirects=True,
            )
        return self._client

    async def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        client = self._get_client()
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._max_retries),
            wait=wait_exponential(multiplier=self._retry_delay, min=0, max=10),
            retry=retry_if_exception_type(httpx.TransportError),
            reraise=True,
        ):
            with attempt:
                response = await client.get(path, params=params)
        self._raise_for_status(response, path)
        return response.json()

    def _raise_for_status(self, response: httpx.Response, path: str) -> None:
        status = response.status_code
        if status < 400:
            return

        message = _error_message(response) or response.reason_phrase
        detail = f"GET {path} returned {status}: {message}"

        if status == 404:
            raise NotFoundError(detail, source=self.name, status_code=status)
        if status == 401:
            raise AuthenticationError(detail, source=self.name, status_code=status)
        # primary limits report remaining=0, secondary limits send retry-after
        exhausted = response.headers.get("x-ratelimit-remaining") == "0" or "retry-after" in response.headers
        if status == 429 or (status == 403 and exhausted):
            raise RateLimitError(
                detail,
                source=self.name,
                status_code=status,
                reset=response.headers.get("x-ratelimit-reset"),
            )
        raise ProviderError(detail, source=self.name, status_code=status)

    async def search_people(self, expression: str, page: int, page_size: int) -> PeopleSearchResult:
        logger.info(f"[GitHub] Searching users: {expression} (page {page})")
        payload = await self._get_json(
            "/search/users",
            params={"q": expression, "page": page, "per_page": page_size},
        )
        items = [SearchHit.model_validate(item) for item in payload.get("items") or []]
        result = PeopleSearchResult(items=items, total_count=int(payload.get("total_count") or 0))
        logger.info(f"[GitHub] Search '{expression}' returned {len(items)} of {result.total_count} users")
        return result

    async def get_profile(self, username: str) -> UserProfile:
        payload = await self._get_json(f"/users/{username}")
        return UserProfile.model_validate(payload)

    async def list_recent_repositories(
        self,
        username: str,
        limit: int = REPO_SAMPLE_SIZE,
    ) -> List[RepositorySummary]:
        payload = await self._get_json(
            f"/users/{username}/repos",
            params={"sort": "pushed", "per_page": limit},
        )
        return [RepositorySummary.model_validate(item) for item in list(payload or [])[:limit]]

    async def close(self):
        """Close the HTTP client"""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
        await super().close()


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return ""
    if isinstance(body, dict):
        return str(body.get("message") or "")
    return ""
