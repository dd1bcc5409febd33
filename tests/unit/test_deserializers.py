"""Unit tests for issue, comment, review and commit payload decoding."""

from __future__ import annotations

import pytest

from ghwrapper.deserializers import (
    deserialize_comment,
    deserialize_commit,
    deserialize_issue,
    deserialize_review,
)
from ghwrapper.enums import State, StateReason
from ghwrapper.event_processors import deserialize_events
from ghwrapper.exceptions import IssueDeserializationError
from tests.helpers.factories import REPO_API, commit_json, event_json, issue_json, ts, user


class TestDeserializeIssue:
    def test_basic_fields(self):
        builder = deserialize_issue(issue_json(7))

        assert builder.number == 7
        assert builder.url == f"{REPO_API}/issues/7"
        assert builder.title == "Widget explodes"
        assert builder.user is not None and builder.user.login == "octocat"
        assert builder.state is State.OPEN
        assert builder.state_reason is StateReason.NONE
        assert builder.created_at == ts(1, 9)
        assert builder.is_pull_request is False
        assert builder.is_frozen is False

    def test_html_url_used_when_api_url_missing(self):
        data = issue_json(7)
        del data["url"]

        assert deserialize_issue(data).url == "https://github.com/octo/widgets/issues/7"

    def test_closed_pull_request(self):
        data = issue_json(
            8,
            state="closed",
            state_reason="completed",
            closed_at="2025-03-04T00:00:00Z",
            pull_request={"url": f"{REPO_API}/pulls/8"},
            type={"name": "Bug", "description": "Something is broken"},
        )
        builder = deserialize_issue(data)

        assert builder.state is State.CLOSED
        assert builder.state_reason is StateReason.COMPLETED
        assert builder.closed_at == ts(4)
        assert builder.is_pull_request is True
        assert builder.type is not None and builder.type.name == "Bug"

    def test_missing_number_is_fatal(self):
        data = issue_json()
        del data["number"]

        with pytest.raises(IssueDeserializationError, match="issue"):
            deserialize_issue(data)

    def test_full_assembly(self, resolver):
        builder = deserialize_issue(issue_json(7))
        builder.set_events(
            deserialize_events(
                [
                    event_json("closed", created_at="2025-03-05T00:00:00Z", state_reason="completed"),
                    event_json("labeled", created_at="2025-03-02T00:00:00Z", label={"name": "bug"}),
                ],
                resolver,
            )
        )
        comment = {"body": "Same here", "user": {"login": "hubot"}, "created_at": "2025-03-03T00:00:00Z"}
        builder.set_comments([deserialize_comment(comment)])

        issue = builder.freeze()

        assert [e.event for e in issue.events] == ["labeled", "closed"]
        assert issue.comments[0].target == "Same here"


class TestDeserializeComment:
    def test_link_fields(self):
        link = deserialize_comment(
            {"body": "LGTM", "user": {"login": "hubot"}, "created_at": "2025-03-02T00:00:00Z"}
        )

        assert link.target == "LGTM"
        assert link.user == user("hubot")
        assert link.referenced_at == ts(2)

    def test_null_body_becomes_empty(self):
        link = deserialize_comment({"body": None, "user": None, "created_at": "2025-03-02T00:00:00Z"})
        assert link.target == ""


class TestDeserializeReview:
    def test_submitted_review(self):
        review = deserialize_review(
            {
                "id": 80,
                "user": {"login": "hubot"},
                "body": "Nice",
                "state": "APPROVED",
                "submitted_at": "2025-03-03T00:00:00Z",
                "commit_id": "abc123",
            }
        )

        assert review.id == 80
        assert review.state == "APPROVED"
        assert review.submitted_at == ts(3)
        assert review.commit_id == "abc123"

    def test_pending_review_has_no_submission_time(self):
        review = deserialize_review({"id": 81, "state": "PENDING"})
        assert review.submitted_at is None

    def test_missing_state_is_fatal(self):
        with pytest.raises(IssueDeserializationError, match="review"):
            deserialize_review({"id": 81})


class TestDeserializeCommit:
    def test_linked_author(self):
        result = deserialize_commit(commit_json("abc123"))

        assert result.hash == "abc123"
        assert result.author == "octocat"
        assert result.message == "Fix the widget"
        assert result.author_time == ts(2, 8).replace(minute=30)

    def test_unlinked_author_falls_back_to_git_name(self):
        result = deserialize_commit(commit_json("abc123", author=None))
        assert result.author == "Octo Cat"

    def test_missing_date_leaves_author_time_unknown(self):
        result = deserialize_commit(
            commit_json("abc123", commit={"message": "x", "author": {"name": "Octo Cat"}})
        )
        assert result.author_time is None
