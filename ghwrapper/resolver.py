"""
Cross-reference resolution.

The event pipeline and the issue accessors never look entities up on their
own; they go through a ``CrossReferenceResolver`` supplied by the caller
(usually a ``RepositoryCache``). Resolvers return None on a miss and do not
raise.
"""

import logging
from typing import TYPE_CHECKING, Protocol

from ghwrapper.types import GitHubCommit

if TYPE_CHECKING:
    from ghwrapper.issue import IssueData

logger = logging.getLogger(__name__)


class IssueResolver(Protocol):
    def resolve_issue(self, number: int) -> "IssueData | None": ...


class CrossReferenceResolver(IssueResolver, Protocol):
    """Lookups the core needs from the repository cache."""

    def resolve_commit(self, commit_hash: str) -> GitHubCommit | None: ...

    def resolve_commit_by_url(self, commit_hash: str, url: str) -> GitHubCommit | None: ...


def resolve_commit_reference(
    resolver: CrossReferenceResolver,
    commit_hash: str,
    commit_url: str | None,
) -> GitHubCommit | None:
    """
    Resolve a commit hash, retrying through its API URL on a miss.

    Args:
        resolver: Cache collaborator
        commit_hash: Hash from the event payload
        commit_url: Accompanying ``commit_url``; the retry is skipped without it

    Returns:
        The cached commit, or None if both lookups missed
    """
    commit = resolver.resolve_commit(commit_hash)
    if commit is not None:
        return commit

    if not commit_url:
        logger.warning(f"Could not find commit {commit_hash} and no commit URL to retry with")
        return None

    logger.warning(f"Found commit unknown to GitHub and local git repo: {commit_hash}. Retrying using URL...")
    commit = resolver.resolve_commit_by_url(commit_hash, commit_url)
    if commit is None:
        logger.warning(f"Could not find commit: {commit_hash}")
    return commit
