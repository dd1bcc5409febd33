"""Exceptions for ghwrapper."""

from typing import Any


class GitHubAPIError(Exception):
    """Error from GitHub API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        rate_limit_reset: int | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.rate_limit_reset = rate_limit_reset  # Unix timestamp when rate limit resets
        super().__init__(message)


class EventDeserializationError(ValueError):
    """A timeline event payload is missing fields its variant requires.

    Fatal for the single event; callers decide whether to abort the whole pass.
    """

    def __init__(self, event_name: str | None, reason: str, payload: Any = None):
        self.event_name = event_name
        self.reason = reason
        self.payload = payload
        super().__init__(f"Malformed {event_name or 'unknown'!r} event: {reason}")


class IssueDeserializationError(ValueError):
    """An issue, comment, review or commit payload could not be decoded."""

    def __init__(self, entity: str, reason: str):
        self.entity = entity
        self.reason = reason
        super().__init__(f"Malformed {entity} payload: {reason}")


class IssueFrozenError(RuntimeError):
    """Mutation attempted on an issue after it was frozen."""

    def __init__(self, number: int | None, operation: str):
        self.number = number
        self.operation = operation
        super().__init__(f"Issue #{number} is frozen; {operation} is not supported")
