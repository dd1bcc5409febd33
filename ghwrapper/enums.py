"""
Enumerations decoded from GitHub's free-form strings.

Every decoder here is total: unknown input maps to an explicit catch-all
member instead of raising, so new values added upstream by GitHub do not
break deserialization.
"""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class State(str, Enum):
    """Open/closed state of an issue or pull request."""

    OPEN = "open"
    CLOSED = "closed"
    ANY = "any"  # Filter value; also used for unknown states

    @classmethod
    def from_string(cls, value: str | None) -> "State":
        if value is None:
            return cls.ANY
        try:
            return cls(value.lower())
        except ValueError:
            logger.warning(f"Unknown issue state {value!r}, using ANY")
            return cls.ANY


class StateReason(str, Enum):
    """Reason attached to the current state of an issue or pull request."""

    COMPLETED = "completed"
    REOPENED = "reopened"
    NOT_PLANNED = "not_planned"
    DUPLICATE = "duplicate"
    # Meta values: NONE = GitHub sent no reason, ANY = match anything / unknown
    NONE = "none"
    ANY = "any"

    @classmethod
    def from_string(cls, value: str | None) -> "StateReason":
        """
        Decode GitHub's ``state_reason`` string.

        Args:
            value: Raw string, or None when the field is absent or JSON null

        Returns:
            The matching member, NONE for missing input, ANY for anything unrecognised
        """
        if value is None:
            return cls.NONE

        member = _STATE_REASONS.get(value.lower())
        if member is None:
            logger.warning(f"Unknown state reason {value!r}, using ANY")
            return cls.ANY
        return member

    def to_wire(self) -> str | None:
        """Inverse of from_string for the values GitHub actually sends."""
        if self is StateReason.NONE:
            return None
        return self.value


_STATE_REASONS: dict[str, StateReason] = {
    "completed": StateReason.COMPLETED,
    "reopened": StateReason.REOPENED,
    "not_planned": StateReason.NOT_PLANNED,
    "duplicate": StateReason.DUPLICATE,
}


class IssueTypeChangeKind(str, Enum):
    """Which kind of issue type change an ``issue_type_*`` event records."""

    ADDED = "issue_type_added"
    CHANGED = "issue_type_changed"
    REMOVED = "issue_type_removed"
    ANY = "any"

    @classmethod
    def from_string(cls, value: str | None) -> "IssueTypeChangeKind":
        if value is None:
            return cls.ANY
        try:
            return cls(value.lower())
        except ValueError:
            logger.warning(f"Unknown issue type change {value!r}, using ANY")
            return cls.ANY
