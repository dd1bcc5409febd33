"""
Event deserialization: dispatch plus per-variant post-processing.

``deserialize_event`` classifies the raw payload, validates it against the
variant's structural model and then runs the variant's post-processor. Post-
processors see the raw JSON and the resolver and return an updated copy of
the (immutable) event.

Adding a new event kind means one ``EVENT_KINDS`` entry, one model, and
optionally one entry in ``POST_PROCESSORS``.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from ghwrapper.enums import StateReason
from ghwrapper.events import (
    EVENT_MODELS,
    LABEL_ADDED_EVENT,
    EventData,
    EventKind,
    classify,
)
from ghwrapper.exceptions import EventDeserializationError
from ghwrapper.resolver import CrossReferenceResolver, resolve_commit_reference

logger = logging.getLogger(__name__)

PostProcessor = Callable[[EventData, Mapping[str, Any], CrossReferenceResolver], EventData]


class DismissedReviewPayload(BaseModel):
    """Nested ``dismissed_review`` object of a review dismissal event."""

    review_id: int
    state: str
    dismissal_message: str | None = None
    dismissal_commit_id: str | None = None


def _process_referenced(
    event: EventData, raw: Mapping[str, Any], resolver: CrossReferenceResolver
) -> EventData:
    commit_id = raw.get("commit_id")
    if commit_id is None:
        # Plain cross-reference without a commit; nothing to resolve
        return event

    commit = resolve_commit_reference(resolver, commit_id, raw.get("commit_url"))
    return event.model_copy(update={"commit": commit})


def _process_labeled(
    event: EventData, raw: Mapping[str, Any], resolver: CrossReferenceResolver
) -> EventData:
    return event.model_copy(update={"added": raw["event"] == LABEL_ADDED_EVENT})


def _process_state_changed(
    event: EventData, raw: Mapping[str, Any], resolver: CrossReferenceResolver
) -> EventData:
    value = raw.get("state_reason")
    if value is not None and not isinstance(value, str):
        raise EventDeserializationError(raw["event"], "state_reason must be a string", raw)
    return event.model_copy(update={"state_reason": StateReason.from_string(value)})


def _process_dismissed_review(
    event: EventData, raw: Mapping[str, Any], resolver: CrossReferenceResolver
) -> EventData:
    nested = raw.get("dismissed_review")
    if not isinstance(nested, Mapping):
        raise EventDeserializationError(raw["event"], "missing dismissed_review object", raw)

    try:
        payload = DismissedReviewPayload.model_validate(nested)
    except ValidationError as e:
        raise EventDeserializationError(raw["event"], str(e), raw) from e

    return event.model_copy(update=payload.model_dump())


def _no_op(
    event: EventData, raw: Mapping[str, Any], resolver: CrossReferenceResolver
) -> EventData:
    return event


POST_PROCESSORS: dict[EventKind, PostProcessor] = {
    EventKind.DEFAULT: _no_op,
    EventKind.LABELED: _process_labeled,
    EventKind.REFERENCED: _process_referenced,
    EventKind.STATE_CHANGED: _process_state_changed,
    EventKind.CONNECTED: _no_op,
    EventKind.ISSUE_TYPE_CHANGED: _no_op,
    EventKind.PARENT_ISSUE_CHANGED: _no_op,
    EventKind.SUB_ISSUE_CHANGED: _no_op,
    EventKind.REQUESTED_REVIEW: _no_op,
    EventKind.DISMISSED_REVIEW: _process_dismissed_review,
    EventKind.ASSIGNED: _no_op,
}


def deserialize_event(raw: Mapping[str, Any], resolver: CrossReferenceResolver) -> EventData:
    """
    Turn one raw timeline event into its typed variant.

    Args:
        raw: Event object from GitHub's ``issues/events`` endpoint
        resolver: Used to resolve referenced commits

    Returns:
        The populated event variant

    Raises:
        EventDeserializationError: If the payload lacks fields its variant requires
    """
    if not isinstance(raw, Mapping) or not isinstance(raw.get("event"), str):
        raise EventDeserializationError(None, "missing 'event' discriminator", raw)

    kind = classify(raw)
    model = EVENT_MODELS[kind]
    shape = {key: value for key, value in raw.items() if key not in model.derived_fields}

    try:
        event = model.model_validate(shape)
    except ValidationError as e:
        raise EventDeserializationError(raw["event"], str(e), raw) from e

    return POST_PROCESSORS[kind](event, raw, resolver)


def deserialize_events(
    raws: Iterable[Mapping[str, Any]], resolver: CrossReferenceResolver
) -> list[EventData]:
    """Deserialize a page of events; the first malformed one aborts the pass."""
    events = [deserialize_event(raw, resolver) for raw in raws]
    logger.debug(f"Deserialized {len(events)} events")
    return events
