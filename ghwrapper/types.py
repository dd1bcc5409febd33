"""Data types for GitHub issue graph entities."""

from dataclasses import dataclass
from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class UserData(BaseModel):
    """A GitHub account as embedded in issues, events and reviews."""

    model_config = ConfigDict(frozen=True)

    login: str
    id: int | None = None
    type: str | None = None  # "User", "Bot", "Organization"
    html_url: str | None = None


class LabelData(BaseModel):
    """Label attached to or removed from an issue."""

    model_config = ConfigDict(frozen=True)

    name: str
    color: str | None = None


class TypeData(BaseModel):
    """Issue type (e.g. "Bug", "Feature") configured on the organization."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str | None = None


@dataclass(frozen=True)
class GitHubCommit:
    """A commit known to the repository cache."""

    hash: str
    author_time: datetime | None  # None when GitHub could not attribute the commit
    author: str | None = None
    message: str | None = None
    url: str | None = None


@dataclass(frozen=True)
class ReferencedLink(Generic[T]):
    """
    Typed edge from an issue to something it mentions.

    Used uniformly for comments (target = body text), reviews, related
    commits and related issues. Equality is structural, so two links to the
    same target by the same user at the same time collapse on dedup.
    """

    target: T
    user: UserData | None
    referenced_at: datetime

    @property
    def link_time(self) -> datetime:
        return self.referenced_at


@dataclass(frozen=True)
class ReviewData:
    """A pull request review."""

    id: int
    user: UserData | None
    state: str  # "APPROVED", "CHANGES_REQUESTED", "COMMENTED", "DISMISSED", "PENDING"
    submitted_at: datetime | None  # None while the review is pending
    body: str | None = None
    commit_id: str | None = None
