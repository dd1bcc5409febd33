"""Unit tests for RepositoryCache as a cross-reference resolver."""

from __future__ import annotations

from unittest.mock import MagicMock

from ghwrapper.cache import RepositoryCache
from ghwrapper.config import settings
from ghwrapper.event_processors import deserialize_event
from ghwrapper.issue import IssueBuilder
from ghwrapper.resolver import resolve_commit_reference
from tests.helpers.factories import commit, event_json, ts

URL = "https://api.github.com/repos/octo/widgets/commits/abc123"


class TestIssueLookup:
    def test_resolves_added_issue(self):
        issue = IssueBuilder(number=4, url="https://x/issues/4", created_at=ts(1)).freeze()
        cache = RepositoryCache()
        cache.add_issues([issue])

        assert cache.resolve_issue(4) is issue
        assert cache.resolve_issue(5) is None


class TestCommitLookup:
    def test_hash_hit_does_not_fetch(self):
        fetcher = MagicMock()
        cache = RepositoryCache(commit_fetcher=fetcher)
        cache.add_commit(commit("abc123"))

        assert resolve_commit_reference(cache, "abc123", URL) == commit("abc123")
        fetcher.assert_not_called()

    def test_url_fallback_fetches_once(self):
        fetcher = MagicMock(return_value=commit("abc123"))
        cache = RepositoryCache(commit_fetcher=fetcher)

        first = cache.resolve_commit_by_url("abc123", URL)
        second = cache.resolve_commit_by_url("abc123", URL)

        assert first == second == commit("abc123")
        fetcher.assert_called_once_with(URL)
        # Fetched commits are found by hash afterwards
        assert cache.resolve_commit("abc123") == commit("abc123")

    def test_misses_are_not_cached(self):
        fetcher = MagicMock(return_value=None)
        cache = RepositoryCache(commit_fetcher=fetcher)

        assert cache.resolve_commit_by_url("abc123", URL) is None
        assert cache.resolve_commit_by_url("abc123", URL) is None
        assert fetcher.call_count == 2

    def test_without_fetcher_url_lookup_misses(self):
        assert RepositoryCache().resolve_commit_by_url("abc123", URL) is None

    def test_drives_referenced_events(self):
        cache = RepositoryCache(commit_fetcher=MagicMock(return_value=commit("abc123")))

        event = deserialize_event(
            event_json("referenced", commit_id="abc123", commit_url=URL), cache
        )

        assert event.commit == commit("abc123")


class TestCacheMaintenance:
    def test_stats_and_clear(self):
        cache = RepositoryCache(
            commit_fetcher=MagicMock(return_value=commit("f00")), fetched_maxsize=5
        )
        cache.add_commits([commit("a"), commit("b")])
        cache.resolve_commit_by_url("f00", URL)

        stats = cache.get_cache_stats()
        assert stats["commits"]["size"] == 2
        assert stats["fetched_commits"] == {"size": 1, "maxsize": 5}

        cache.clear()

        assert cache.get_cache_stats()["commits"]["size"] == 0
        assert cache.resolve_commit("f00") is None

    def test_explicit_zero_sizes_are_respected(self):
        fetcher = MagicMock(return_value=commit("f00"))
        cache = RepositoryCache(commit_fetcher=fetcher, fetched_ttl=0, fetched_maxsize=0)

        assert cache.get_cache_stats()["fetched_commits"]["maxsize"] == 0
        assert cache.resolve_commit_by_url("f00", URL) == commit("f00")
        assert cache.resolve_commit_by_url("f00", URL) == commit("f00")
        assert fetcher.call_count == 2
        assert cache.resolve_commit("f00") is None

    def test_defaults_come_from_settings(self):
        stats = RepositoryCache().get_cache_stats()
        assert stats["fetched_commits"]["maxsize"] == settings.commit_cache_maxsize
