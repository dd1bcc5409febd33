"""
In-memory repository cache.

``RepositoryCache`` stores the issues and commits loaded for one repository
and implements the ``CrossReferenceResolver`` lookups the event pipeline
and issue accessors depend on.

Commits the cache did not know about up front can be pulled in through the
URL fallback. Those are kept in a TTL cache, since they come from the network
rather than from the repository's own commit list.
"""

import logging
from collections.abc import Callable, Iterable

from cachetools import TTLCache  # type: ignore[import-untyped]

from ghwrapper.config import settings
from ghwrapper.issue import IssueData
from ghwrapper.types import GitHubCommit

logger = logging.getLogger(__name__)

CommitFetcher = Callable[[str], GitHubCommit | None]


class RepositoryCache:
    """Issue and commit lookup for a single repository."""

    def __init__(
        self,
        commit_fetcher: CommitFetcher | None = None,
        fetched_ttl: int | None = None,
        fetched_maxsize: int | None = None,
    ):
        self._issues: dict[int, IssueData] = {}
        self._commits: dict[str, GitHubCommit] = {}
        self._fetched: TTLCache[str, GitHubCommit] = TTLCache(
            maxsize=settings.commit_cache_maxsize if fetched_maxsize is None else fetched_maxsize,
            ttl=settings.commit_cache_ttl if fetched_ttl is None else fetched_ttl,
        )
        self._commit_fetcher = commit_fetcher

    def add_issue(self, issue: IssueData) -> None:
        self._issues[issue.number] = issue

    def add_issues(self, issues: Iterable[IssueData]) -> None:
        for issue in issues:
            self.add_issue(issue)

    def add_commit(self, commit: GitHubCommit) -> None:
        self._commits[commit.hash] = commit

    def add_commits(self, commits: Iterable[GitHubCommit]) -> None:
        for commit in commits:
            self.add_commit(commit)

    def resolve_issue(self, number: int) -> IssueData | None:
        return self._issues.get(number)

    def resolve_commit(self, commit_hash: str) -> GitHubCommit | None:
        commit = self._commits.get(commit_hash)
        if commit is None:
            commit = self._fetched.get(commit_hash)
        return commit

    def resolve_commit_by_url(self, commit_hash: str, url: str) -> GitHubCommit | None:
        """
        Look a commit up through its API URL.

        Hits are remembered (keyed by hash) for the TTL; misses are not, so a
        later call retries the fetch.
        """
        if commit_hash in self._fetched:
            logger.debug(f"Cache HIT: commit {commit_hash}")
            cached: GitHubCommit = self._fetched[commit_hash]
            return cached

        if self._commit_fetcher is None:
            return None

        logger.debug(f"Cache MISS: commit {commit_hash}, fetching {url}")
        commit = self._commit_fetcher(url)
        # maxsize 0 disables remembering fetched commits
        if commit is not None and self._fetched.maxsize > 0:
            self._fetched[commit_hash] = commit
        return commit

    def clear(self) -> None:
        """Drop all cached issues and commits."""
        self._issues.clear()
        self._commits.clear()
        self._fetched.clear()
        logger.debug("Cleared repository cache")

    def get_cache_stats(self) -> dict[str, dict[str, int]]:
        """Get current cache sizes for monitoring."""
        return {
            "issues": {"size": len(self._issues)},
            "commits": {"size": len(self._commits)},
            "fetched_commits": {"size": len(self._fetched), "maxsize": int(self._fetched.maxsize)},
        }
