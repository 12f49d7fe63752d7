"""Unit tests for the search aggregator."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from aggregator.search_aggregator import (
    MISSING_TOKEN_MESSAGE,
    ProfileSearchAggregator,
    build_search_expression,
)
from models import PeopleSearchResult, RepositorySummary, SearchHit, SearchQuery, UserProfile
from providers.base import ProfileProvider, RepositoryLister, SearchProvider
from utils.exceptions import (
    AuthenticationError,
    ConfigurationError,
    InvalidQueryError,
    RateLimitError,
    SearchError,
)


def _hit(index: int) -> SearchHit:
    return SearchHit(
        login=f"user{index}",
        id=1000 + index,
        avatar_url=f"https://avatars.example.com/{index}",
        html_url=f"https://github.com/user{index}",
    )


class _FakeSearch(SearchProvider):
    def __init__(self, hits=(), total_count=None, error: Exception = None, configured: bool = True):
        self._hits = list(hits)
        self._total = len(self._hits) if total_count is None else total_count
        self._error = error
        self._configured = configured
        self.calls = []
        self.closed = 0

    def is_configured(self) -> bool:
        return self._configured

    async def search_people(self, expression, page, page_size):
        self.calls.append((expression, page, page_size))
        if self._error is not None:
            raise self._error
        return PeopleSearchResult(items=self._hits, total_count=self._total)

    async def close(self):
        self.closed += 1


class _FakeProfiles(ProfileProvider):
    """Profiles for every login; earlier logins answer later to scramble completion order."""

    def __init__(self, failing=(), delays=None):
        self._failing = set(failing)
        self._delays = dict(delays or {})
        self.calls = []
        self.completed = []
        self.closed = 0

    async def get_profile(self, username):
        self.calls.append(username)
        await asyncio.sleep(self._delays.get(username, 0))
        if username in self._failing:
            raise RateLimitError("secondary rate limit", source="GitHub", status_code=403)
        self.completed.append(username)
        index = int(username.replace("user", ""))
        return UserProfile(
            login=username,
            id=1000 + index,
            avatar_url=f"https://avatars.example.com/{index}",
            html_url=f"https://github.com/{username}",
            name=f"User {index}",
            bio="rust enthusiast",
            followers=10 * index,
            following=index,
        )

    async def close(self):
        self.closed += 1


class _FakeLister(RepositoryLister):
    def __init__(self, language="Rust"):
        self._language = language
        self.calls = []

    async def list_recent_repositories(self, username, limit=10):
        self.calls.append(username)
        return [RepositorySummary(name="r", language=self._language)]


def _aggregator(search, profiles=None, lister=None) -> ProfileSearchAggregator:
    return ProfileSearchAggregator(search, profiles or _FakeProfiles(), lister or _FakeLister())


@pytest.mark.parametrize(
    "keyword,location,expected",
    [
        ("rust", None, "rust in:bio"),
        ("rust", "", "rust in:bio"),
        ("rust", "   ", "rust in:bio"),
        ("rust", "Berlin", "rust in:bio location:Berlin"),
        ("machine learning", "San Francisco", "machine learning in:bio location:San Francisco"),
    ],
)
def test_build_search_expression(keyword, location, expected):
    assert build_search_expression(keyword, location) == expected


@pytest.mark.asyncio
async def test_search_issues_expression_with_fixed_page_size():
    search = _FakeSearch([_hit(1)])
    aggregator = _aggregator(search)

    await aggregator.search(SearchQuery(keyword="rust", location="Berlin", page=3))

    assert search.calls == [("rust in:bio location:Berlin", 3, 10)]


@pytest.mark.asyncio
async def test_items_follow_search_ranking_not_completion_order():
    hits = [_hit(i) for i in range(1, 8)]
    # first-ranked hit resolves last
    delays = {f"user{i}": 0.01 * (8 - i) for i in range(1, 8)}
    profiles = _FakeProfiles(delays=delays)
    aggregator = _aggregator(_FakeSearch(hits, total_count=42), profiles)

    page = await aggregator.search(SearchQuery(keyword="rust", page=2))

    assert profiles.completed[0] == "user7"
    assert [p.login for p in page.items] == [h.login for h in hits]
    assert len(page.items) == 7
    assert page.total_count == 42
    assert page.current_page == 2
    assert page.no_results is False
    assert all(p.dominant_language == "Rust" for p in page.items)


@pytest.mark.asyncio
async def test_total_count_is_capped_at_1000():
    aggregator = _aggregator(_FakeSearch([_hit(1)], total_count=48213))

    page = await aggregator.search(SearchQuery(keyword="python"))

    assert page.total_count == 1000
    assert page.total_pages == 100


@pytest.mark.asyncio
async def test_zero_hits_skips_enrichment():
    profiles = _FakeProfiles()
    lister = _FakeLister()
    aggregator = _aggregator(_FakeSearch([], total_count=0), profiles, lister)

    page = await aggregator.search(SearchQuery(keyword="nobody-has-this-bio", page=4))

    assert page.no_results is True
    assert page.items == []
    assert page.total_count == 0
    assert page.current_page == 4
    assert profiles.calls == []
    assert lister.calls == []


@pytest.mark.asyncio
async def test_one_failed_enrichment_degrades_only_that_row():
    hits = [_hit(i) for i in range(1, 5)]
    profiles = _FakeProfiles(failing={"user3"})
    aggregator = _aggregator(_FakeSearch(hits), profiles)

    page = await aggregator.search(SearchQuery(keyword="rust"))

    assert len(page.items) == 4
    failed = page.items[2]
    assert failed.login == "user3"
    assert failed.avatar_url == hits[2].avatar_url
    assert failed.html_url == hits[2].html_url
    assert failed.followers == 0
    assert failed.following == 0
    assert failed.dominant_language is None
    assert failed.bio is None
    assert [p.name for i, p in enumerate(page.items) if i != 2] == ["User 1", "User 2", "User 4"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [
        httpx.ConnectError("connection refused"),
        AuthenticationError("Bad credentials", source="GitHub", status_code=401),
        RateLimitError("API rate limit exceeded", source="GitHub", status_code=403),
    ],
)
async def test_search_call_failure_propagates_as_search_error(error):
    profiles = _FakeProfiles()
    aggregator = _aggregator(_FakeSearch(error=error), profiles)

    with pytest.raises(SearchError) as info:
        await aggregator.search(SearchQuery(keyword="rust"))

    assert info.value.__cause__ is error
    assert info.value.expression == "rust in:bio"
    assert profiles.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("keyword", ["", "   ", "\t\n"])
async def test_blank_keyword_issues_no_call(keyword):
    search = _FakeSearch([_hit(1)])

    with pytest.raises(InvalidQueryError):
        await _aggregator(search).search(SearchQuery(keyword=keyword))

    assert search.calls == []


@pytest.mark.asyncio
async def test_missing_credentials_is_a_configuration_error():
    search = _FakeSearch([_hit(1)], configured=False)

    with pytest.raises(ConfigurationError) as info:
        await _aggregator(search).search(SearchQuery(keyword="rust"))

    assert info.value.message == MISSING_TOKEN_MESSAGE
    assert search.calls == []


@pytest.mark.asyncio
async def test_single_provider_serves_every_lookup_and_closes_once():
    class _AllInOne(_FakeSearch, ProfileProvider, RepositoryLister):
        def __init__(self):
            super().__init__([_hit(1), _hit(2)])
            self.profile_calls = []

        async def get_profile(self, username):
            self.profile_calls.append(username)
            return UserProfile(login=username, id=1, name=username.upper())

        async def list_recent_repositories(self, username, limit=10):
            return [RepositorySummary(name="r", language="Go")]

    provider = _AllInOne()

    async with ProfileSearchAggregator(provider) as aggregator:
        page = await aggregator.search(SearchQuery(keyword="go"))

    assert [p.dominant_language for p in page.items] == ["Go", "Go"]
    assert provider.profile_calls == ["user1", "user2"]
    assert provider.closed == 1


@pytest.mark.asyncio
async def test_search_profiles_runs_one_page_and_closes(monkeypatch):
    from aggregator import search_aggregator

    search = _FakeSearch([_hit(1)], total_count=1)
    profiles = _FakeProfiles()
    monkeypatch.setattr(
        search_aggregator,
        "build_aggregator",
        lambda: ProfileSearchAggregator(search, profiles, _FakeLister()),
    )

    page = await search_aggregator.search_profiles("rust", " Berlin ", page=3)

    assert search.calls == [("rust in:bio location:Berlin", 3, 10)]
    assert page.current_page == 3
    assert [p.login for p in page.items] == ["user1"]
    assert search.closed == 1
    assert profiles.closed == 1


@pytest.mark.asyncio
async def test_no_lookup_outlives_the_search_call():
    class _SlowLister(RepositoryLister):
        def __init__(self):
            self.finished = []

        async def list_recent_repositories(self, username, limit=10):
            await asyncio.sleep(0.05)
            self.finished.append(username)
            return [RepositorySummary(name="r", language="Go")]

        async def close(self):
            self.closed_after = list(self.finished)

    search = _FakeSearch([_hit(1), _hit(2)])
    profiles = _FakeProfiles(failing={"user1"})
    lister = _SlowLister()

    async with ProfileSearchAggregator(search, profiles, lister) as aggregator:
        page = await aggregator.search(SearchQuery(keyword="rust"))

    pending = [task for task in asyncio.all_tasks() if task is not asyncio.current_task()]
    assert pending == []
    assert sorted(lister.closed_after) == ["user1", "user2"]
    assert page.items[0].name == "user1"
    assert page.items[1].dominant_language == "Go"
