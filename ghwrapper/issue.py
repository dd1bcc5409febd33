"""
Issues: a mutable ``IssueBuilder`` that deserializers populate, and the
immutable ``IssueData`` it produces on ``freeze()``.

Freezing normalizes every collection once (drop None entries, dedup where
applicable, sort by timestamp) and stores them as tuples. The builder
rejects all mutation afterwards.
"""

import logging
from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Any, TypeVar

from ghwrapper.enums import State, StateReason
from ghwrapper.events import EventData
from ghwrapper.exceptions import IssueFrozenError
from ghwrapper.resolver import IssueResolver
from ghwrapper.types import GitHubCommit, ReferencedLink, ReviewData, TypeData, UserData

logger = logging.getLogger(__name__)

H = TypeVar("H", bound=Hashable)


@dataclass(frozen=True, eq=False)
class IssueData:
    """
    A frozen issue (or pull request) with its comments, events and links.

    Equality and hashing use the URL only: issue numbers repeat across
    repositories, URLs do not.
    """

    number: int
    url: str
    title: str | None
    body: str | None
    user: UserData | None
    state: State
    state_reason: StateReason
    type: TypeData | None
    created_at: datetime
    closed_at: datetime | None
    is_pull_request: bool
    comments: tuple[ReferencedLink[str], ...]
    events: tuple[EventData, ...]
    reviews: tuple[ReviewData, ...]
    related_commits: tuple[ReferencedLink[GitHubCommit], ...]
    related_issue_numbers: tuple[ReferencedLink[int], ...]
    sub_issues: tuple[int, ...]

    def get_related_issues(
        self, resolver: IssueResolver
    ) -> list[ReferencedLink["IssueData | None"]]:
        """
        Resolve related issue numbers into issues.

        Looks every number up again on each call; nothing is cached here.
        Links whose issue is unknown to the resolver keep a None target.
        """
        issues: list[ReferencedLink[IssueData | None]] = []
        for link in self.related_issue_numbers:
            issue = resolver.resolve_issue(link.target)
            if issue is None:
                logger.warning(f"Issue #{self.number} references unknown issue #{link.target}")
            issues.append(ReferencedLink(issue, link.user, link.referenced_at))
        return issues

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, IssueData):
            return NotImplemented
        return self.url == other.url

    def __hash__(self) -> int:
        return hash(self.url)


def _distinct(items: Iterable[H]) -> list[H]:
    # dict keeps first-seen order
    return list(dict.fromkeys(items))


def _sorted_tuple(items: Iterable[Any], key: Callable[[Any], Any]) -> tuple[Any, ...]:
    return tuple(sorted(items, key=key))


def _review_time(review: ReviewData) -> tuple[bool, datetime]:
    # Pending reviews (no submission time) go last
    if review.submitted_at is None:
        return (True, datetime.min)
    return (False, review.submitted_at)


def _is_valid_commit_link(link: ReferencedLink[GitHubCommit] | None) -> bool:
    return link is not None and link.target is not None and link.target.author_time is not None


class IssueBuilder:
    """
    Open (mutable) state of an issue.

    Populated field by field and through the ``set_*`` methods, then turned
    into an ``IssueData`` by ``freeze()``. Builders are not thread-safe;
    keep one confined to a thread until it is frozen.
    """

    def __init__(
        self,
        number: int,
        url: str,
        created_at: datetime,
        title: str | None = None,
        body: str | None = None,
        user: UserData | None = None,
        state: State = State.OPEN,
        state_reason: StateReason = StateReason.NONE,
        type: TypeData | None = None,
        closed_at: datetime | None = None,
        is_pull_request: bool = False,
    ):
        self._frozen: IssueData | None = None
        self.number = number
        self.url = url
        self.created_at = created_at
        self.title = title
        self.body = body
        self.user = user
        self.state = state
        self.state_reason = state_reason
        self.type = type
        self.closed_at = closed_at
        self.is_pull_request = is_pull_request

        self._comments: list[ReferencedLink[str] | None] | None = None
        self._events: list[EventData | None] | None = None
        self._reviews: list[ReviewData | None] | None = None
        self._related_commits: list[ReferencedLink[GitHubCommit] | None] | None = None
        self._related_issues: list[ReferencedLink[int] | None] | None = None
        self._sub_issues: list[int | None] | None = None

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, "_frozen", None) is not None:
            raise IssueFrozenError(self.number, f"setting {name!r}")
        super().__setattr__(name, value)

    @property
    def is_frozen(self) -> bool:
        return self._frozen is not None

    def set_comments(self, comments: Iterable[ReferencedLink[str] | None]) -> None:
        self._comments = list(comments)

    def set_events(self, events: Iterable[EventData | None]) -> None:
        self._events = list(events)

    def set_reviews(self, reviews: Iterable[ReviewData | None]) -> None:
        self._reviews = list(reviews)

    def set_related_commits(self, commits: Iterable[ReferencedLink[GitHubCommit] | None]) -> None:
        self._related_commits = list(commits)

    def set_sub_issues(self, numbers: Iterable[int | None]) -> None:
        self._sub_issues = list(numbers)

    def set_related_issues(self, issues: Iterable[ReferencedLink[int] | None]) -> None:
        """Set related issues from links that already hold issue numbers."""
        self._related_issues = [
            ReferencedLink(link.target, link.user, link.referenced_at) if link is not None else None
            for link in issues
        ]

    def set_related_issues_from_issue_data(
        self, issues: Iterable["ReferencedLink[IssueData | IssueBuilder] | None"]
    ) -> None:
        """Set related issues from links to full issues, keeping only their numbers."""
        self._related_issues = [
            ReferencedLink(link.target.number, link.user, link.referenced_at)
            if link is not None and link.target is not None
            else None
            for link in issues
        ]

    def freeze(self) -> IssueData:
        """
        Normalize all collections and lock the issue.

        Calling it again returns the same ``IssueData``.
        """
        if self._frozen is not None:
            return self._frozen

        related_commits = _distinct(
            link for link in (self._related_commits or []) if _is_valid_commit_link(link)
        )
        related_issues = _distinct(link for link in (self._related_issues or []) if link is not None)

        frozen = IssueData(
            number=self.number,
            url=self.url,
            title=self.title,
            body=self.body,
            user=self.user,
            state=self.state,
            state_reason=self.state_reason,
            type=self.type,
            created_at=self.created_at,
            closed_at=self.closed_at,
            is_pull_request=self.is_pull_request,
            comments=_sorted_tuple(
                (c for c in (self._comments or []) if c is not None), key=lambda c: c.link_time
            ),
            events=_sorted_tuple(
                (e for e in (self._events or []) if e is not None), key=lambda e: e.created_at
            ),
            reviews=_sorted_tuple(
                (r for r in (self._reviews or []) if r is not None), key=_review_time
            ),
            related_commits=_sorted_tuple(related_commits, key=lambda c: c.link_time),
            related_issue_numbers=_sorted_tuple(related_issues, key=lambda i: i.link_time),
            sub_issues=tuple(n for n in (self._sub_issues or []) if n is not None),
        )
        logger.debug(
            f"Froze issue #{self.number}: {len(frozen.events)} events, "
            f"{len(frozen.comments)} comments, {len(frozen.related_commits)} related commits"
        )
        # Bypass our own __setattr__ guard for the one-way transition
        object.__setattr__(self, "_frozen", frozen)
        return frozen
