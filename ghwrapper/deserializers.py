"""
Decoding of issue, comment, review and commit payloads.

Payloads are validated with small pydantic models mirroring the GitHub REST
responses, then mapped onto the domain types. Events are handled separately
in ``event_processors``.
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, ValidationError

from ghwrapper.enums import State, StateReason
from ghwrapper.exceptions import IssueDeserializationError
from ghwrapper.issue import IssueBuilder
from ghwrapper.types import GitHubCommit, ReferencedLink, ReviewData, TypeData, UserData


class IssuePayload(BaseModel):
    number: int
    # API url wins over html_url when both are present
    url: str = Field(validation_alias=AliasChoices("url", "html_url"))
    title: str | None = None
    body: str | None = None
    user: UserData | None = None
    state: str | None = None
    state_reason: str | None = None
    type: TypeData | None = None
    created_at: datetime
    closed_at: datetime | None = None
    pull_request: dict[str, Any] | None = None


class CommentPayload(BaseModel):
    body: str | None = None
    user: UserData | None = None
    created_at: datetime


class ReviewPayload(BaseModel):
    id: int
    user: UserData | None = None
    body: str | None = None
    state: str
    submitted_at: datetime | None = None
    commit_id: str | None = None


class _CommitPerson(BaseModel):
    name: str | None = None
    date: datetime | None = None


class _CommitDetail(BaseModel):
    message: str | None = None
    author: _CommitPerson | None = None


class CommitPayload(BaseModel):
    sha: str
    commit: _CommitDetail | None = None
    author: UserData | None = None  # GitHub account; null for unlinked emails
    html_url: str | None = None


def _validate(model: type[BaseModel], data: Mapping[str, Any], entity: str) -> Any:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise IssueDeserializationError(entity, str(e)) from e


def deserialize_issue(data: Mapping[str, Any]) -> IssueBuilder:
    """
    Build an open issue from a GitHub ``issues`` payload.

    Collections (comments, events, ...) are left for the caller to set
    before freezing.

    Raises:
        IssueDeserializationError: If number, url or created_at is missing
    """
    payload: IssuePayload = _validate(IssuePayload, data, "issue")
    return IssueBuilder(
        number=payload.number,
        url=payload.url,
        created_at=payload.created_at,
        title=payload.title,
        body=payload.body,
        user=payload.user,
        state=State.from_string(payload.state),
        state_reason=StateReason.from_string(payload.state_reason),
        type=payload.type,
        closed_at=payload.closed_at,
        is_pull_request=payload.pull_request is not None,
    )


def deserialize_comment(data: Mapping[str, Any]) -> ReferencedLink[str]:
    """Comment as a link from its author to its body text."""
    payload: CommentPayload = _validate(CommentPayload, data, "comment")
    return ReferencedLink(payload.body or "", payload.user, payload.created_at)


def deserialize_review(data: Mapping[str, Any]) -> ReviewData:
    payload: ReviewPayload = _validate(ReviewPayload, data, "review")
    return ReviewData(
        id=payload.id,
        user=payload.user,
        state=payload.state,
        submitted_at=payload.submitted_at,
        body=payload.body,
        commit_id=payload.commit_id,
    )


def deserialize_commit(data: Mapping[str, Any]) -> GitHubCommit:
    """Decode a payload from GitHub's ``commits/{sha}`` endpoint."""
    payload: CommitPayload = _validate(CommitPayload, data, "commit")
    detail = payload.commit
    person = detail.author if detail else None

    if payload.author is not None:
        author = payload.author.login
    else:
        author = person.name if person else None

    return GitHubCommit(
        hash=payload.sha,
        author_time=person.date if person else None,
        author=author,
        message=detail.message if detail else None,
        url=payload.html_url,
    )
