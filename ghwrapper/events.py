"""
Timeline event variants.

GitHub tags every issue event with a free-form ``event`` string. The
``EVENT_KINDS`` table maps those strings onto a closed set of ``EventKind``
discriminators, each backed by one structural model below. Names missing
from the table fall back to the entry stored under the empty string.

Fields listed in a model's ``derived_fields`` are never read straight from
the payload; the matching post-processor in ``event_processors`` fills them.
"""

from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from ghwrapper.enums import IssueTypeChangeKind, StateReason
from ghwrapper.types import GitHubCommit, LabelData, UserData


class EventKind(str, Enum):
    """Discriminator selecting the structural shape of an event."""

    DEFAULT = "default"
    LABELED = "labeled"
    REFERENCED = "referenced"
    STATE_CHANGED = "state_changed"
    CONNECTED = "connected"
    ISSUE_TYPE_CHANGED = "issue_type_changed"
    PARENT_ISSUE_CHANGED = "parent_issue_changed"
    SUB_ISSUE_CHANGED = "sub_issue_changed"
    REQUESTED_REVIEW = "requested_review"
    DISMISSED_REVIEW = "dismissed_review"
    ASSIGNED = "assigned"


# Event name sent by GitHub -> variant. "" is the fallback entry.
EVENT_KINDS: dict[str, EventKind] = {
    "": EventKind.DEFAULT,
    "labeled": EventKind.LABELED,
    "unlabeled": EventKind.LABELED,
    "referenced": EventKind.REFERENCED,
    "merged": EventKind.REFERENCED,
    "closed": EventKind.STATE_CHANGED,
    "reopened": EventKind.STATE_CHANGED,
    "connected": EventKind.CONNECTED,
    "issue_type_added": EventKind.ISSUE_TYPE_CHANGED,
    "issue_type_changed": EventKind.ISSUE_TYPE_CHANGED,
    "issue_type_removed": EventKind.ISSUE_TYPE_CHANGED,
    "parent_issue_added": EventKind.PARENT_ISSUE_CHANGED,
    "parent_issue_removed": EventKind.PARENT_ISSUE_CHANGED,
    "parent_issue_changed": EventKind.PARENT_ISSUE_CHANGED,
    "sub_issue_added": EventKind.SUB_ISSUE_CHANGED,
    "sub_issue_removed": EventKind.SUB_ISSUE_CHANGED,
    "sub_issue_changed": EventKind.SUB_ISSUE_CHANGED,
    "review_requested": EventKind.REQUESTED_REVIEW,
    "review_request_removed": EventKind.REQUESTED_REVIEW,
    "review_dismissed": EventKind.DISMISSED_REVIEW,
    "dismissed_review": EventKind.DISMISSED_REVIEW,  # Older payloads
    "assigned": EventKind.ASSIGNED,
    "unassigned": EventKind.ASSIGNED,
}

LABEL_ADDED_EVENT = "labeled"


def classify(raw: Mapping[str, Any]) -> EventKind:
    """Pick the variant for a raw event object (must carry an ``event`` string)."""
    return EVENT_KINDS.get(raw["event"], EVENT_KINDS[""])


class EventData(BaseModel):
    """Fields shared by every issue event."""

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[EventKind] = EventKind.DEFAULT
    derived_fields: ClassVar[frozenset[str]] = frozenset()

    event: str
    created_at: datetime
    id: int | None = None
    node_id: str | None = None
    url: str | None = None
    actor: UserData | None = None

    def to_wire(self) -> dict[str, Any]:
        """Serialize back into the shape GitHub sends."""
        return self.model_dump(mode="json", exclude=set(self.derived_fields))


class DefaultEventData(EventData):
    """Any event name without a dedicated variant."""


class LabeledEventData(EventData):
    kind: ClassVar[EventKind] = EventKind.LABELED
    derived_fields: ClassVar[frozenset[str]] = frozenset({"added"})

    label: LabelData | None = None
    added: bool = False  # True for "labeled", False for "unlabeled"

    @property
    def label_name(self) -> str | None:
        return self.label.name if self.label else None


class ReferencedEventData(EventData):
    """A commit referenced the issue, or the pull request was merged."""

    kind: ClassVar[EventKind] = EventKind.REFERENCED
    derived_fields: ClassVar[frozenset[str]] = frozenset({"commit"})

    commit_id: str | None = None
    commit_url: str | None = None
    commit: GitHubCommit | None = None  # None when the hash could not be resolved


class StateChangedEventData(EventData):
    kind: ClassVar[EventKind] = EventKind.STATE_CHANGED
    derived_fields: ClassVar[frozenset[str]] = frozenset({"state_reason"})

    state_reason: StateReason = StateReason.NONE

    def to_wire(self) -> dict[str, Any]:
        data = super().to_wire()
        data["state_reason"] = self.state_reason.to_wire()
        return data


class ConnectedEventData(EventData):
    kind: ClassVar[EventKind] = EventKind.CONNECTED


class IssueTypeChangedEventData(EventData):
    kind: ClassVar[EventKind] = EventKind.ISSUE_TYPE_CHANGED

    @property
    def change_kind(self) -> IssueTypeChangeKind:
        return IssueTypeChangeKind.from_string(self.event)


class ParentIssueChangedEventData(EventData):
    kind: ClassVar[EventKind] = EventKind.PARENT_ISSUE_CHANGED


class SubIssueChangedEventData(EventData):
    kind: ClassVar[EventKind] = EventKind.SUB_ISSUE_CHANGED


class RequestedReviewEventData(EventData):
    kind: ClassVar[EventKind] = EventKind.REQUESTED_REVIEW

    requested_reviewer: UserData | None = None
    review_requester: UserData | None = None


class DismissedReviewEventData(EventData):
    """A pull request review was dismissed; details come from ``dismissed_review``."""

    kind: ClassVar[EventKind] = EventKind.DISMISSED_REVIEW
    derived_fields: ClassVar[frozenset[str]] = frozenset(
        {"review_id", "state", "dismissal_message", "dismissal_commit_id"}
    )

    review_id: int | None = None
    state: str | None = None
    dismissal_message: str | None = None
    dismissal_commit_id: str | None = None

    def to_wire(self) -> dict[str, Any]:
        data = super().to_wire()
        data["dismissed_review"] = {
            "review_id": self.review_id,
            "state": self.state,
            "dismissal_message": self.dismissal_message,
            "dismissal_commit_id": self.dismissal_commit_id,
        }
        return data


class AssignedEventData(EventData):
    kind: ClassVar[EventKind] = EventKind.ASSIGNED

    assignee: UserData | None = None
    assigner: UserData | None = None


EVENT_MODELS: dict[EventKind, type[EventData]] = {
    model.kind: model
    for model in (
        DefaultEventData,
        LabeledEventData,
        ReferencedEventData,
        StateChangedEventData,
        ConnectedEventData,
        IssueTypeChangedEventData,
        ParentIssueChangedEventData,
        SubIssueChangedEventData,
        RequestedReviewEventData,
        DismissedReviewEventData,
        AssignedEventData,
    )
}


def serialize_event(event: EventData) -> dict[str, Any]:
    """JSON-compatible dict mirroring the variant's wire shape."""
    return event.to_wire()
