"""
Typed, frozen object graph over GitHub issues, events, reviews and commits.

Usage: `from ghwrapper import deserialize_issue, deserialize_events, RepositoryCache`

Module structure:
- enums.py: State, StateReason and IssueTypeChangeKind decoders
- types.py: Users, labels, commits, links and reviews
- events.py: Event variants and the event-name dispatch table
- event_processors.py: Event deserialization and per-variant post-processing
- resolver.py: Cross-reference resolver contract and commit fallback lookup
- issue.py: IssueBuilder and the frozen IssueData
- deserializers.py: Issue, comment, review and commit payload decoding
- cache.py: In-memory RepositoryCache implementing the resolver
- fetcher.py, http_client.py, helpers.py: Commit lookups by API URL
- exceptions.py: Custom exceptions
"""

from ghwrapper.cache import RepositoryCache
from ghwrapper.deserializers import (
    deserialize_comment,
    deserialize_commit,
    deserialize_issue,
    deserialize_review,
)
from ghwrapper.enums import IssueTypeChangeKind, State, StateReason
from ghwrapper.event_processors import deserialize_event, deserialize_events
from ghwrapper.events import (
    EVENT_KINDS,
    AssignedEventData,
    ConnectedEventData,
    DefaultEventData,
    DismissedReviewEventData,
    EventData,
    EventKind,
    IssueTypeChangedEventData,
    LabeledEventData,
    ParentIssueChangedEventData,
    ReferencedEventData,
    RequestedReviewEventData,
    StateChangedEventData,
    SubIssueChangedEventData,
    classify,
    serialize_event,
)
from ghwrapper.exceptions import (
    EventDeserializationError,
    GitHubAPIError,
    IssueDeserializationError,
    IssueFrozenError,
)
from ghwrapper.fetcher import GitHubCommitFetcher
from ghwrapper.http_client import close_github_client
from ghwrapper.issue import IssueBuilder, IssueData
from ghwrapper.resolver import CrossReferenceResolver, IssueResolver, resolve_commit_reference
from ghwrapper.types import GitHubCommit, LabelData, ReferencedLink, ReviewData, TypeData, UserData

__all__ = [
    # Entry points
    "deserialize_issue",
    "deserialize_comment",
    "deserialize_review",
    "deserialize_commit",
    "deserialize_event",
    "deserialize_events",
    "serialize_event",
    "classify",
    # Issues
    "IssueBuilder",
    "IssueData",
    # Resolution
    "CrossReferenceResolver",
    "IssueResolver",
    "RepositoryCache",
    "GitHubCommitFetcher",
    "resolve_commit_reference",
    "close_github_client",
    # Events
    "EVENT_KINDS",
    "EventKind",
    "EventData",
    "DefaultEventData",
    "LabeledEventData",
    "ReferencedEventData",
    "StateChangedEventData",
    "ConnectedEventData",
    "IssueTypeChangedEventData",
    "ParentIssueChangedEventData",
    "SubIssueChangedEventData",
    "RequestedReviewEventData",
    "DismissedReviewEventData",
    "AssignedEventData",
    # Enums
    "State",
    "StateReason",
    "IssueTypeChangeKind",
    # Types
    "GitHubCommit",
    "LabelData",
    "ReferencedLink",
    "ReviewData",
    "TypeData",
    "UserData",
    # Exceptions
    "EventDeserializationError",
    "GitHubAPIError",
    "IssueDeserializationError",
    "IssueFrozenError",
]
