"""Unit tests for activity rendering."""

from __future__ import annotations

import pytest

from ghactivity.display import (
    capitalize_first,
    format_event,
    render_activity,
    render_no_activity,
)
from ghactivity.models import (
    CommitCommentPayload,
    CreatePayload,
    DeletePayload,
    EventPayload,
    ForkPayload,
    GitHubEvent,
    IssueCommentPayload,
    IssuesPayload,
    PullRequestPayload,
    PullRequestReviewCommentPayload,
    PushPayload,
    ReleasePayload,
    UnrecognizedPayload,
    WatchPayload,
)


def _event(kind: str, payload: EventPayload, repo: str = "user/repo") -> GitHubEvent:
    return GitHubEvent(kind=kind, repository=repo, payload=payload)


@pytest.mark.parametrize(
    ("text", "expected"),
    [("hello", "Hello"), ("world", "World"), ("", ""), ("a", "A")],
)
def test_capitalize_first(text: str, expected: str) -> None:
    """Only the first character changes case."""
    assert capitalize_first(text) == expected


@pytest.mark.parametrize(
    ("event", "expected"),
    [
        (
            _event("PushEvent", PushPayload(commit_count=1)),
            "Pushed 1 commit to user/repo",
        ),
        (
            _event("PushEvent", PushPayload(commit_count=3)),
            "Pushed 3 commits to user/repo",
        ),
        (
            _event("IssuesEvent", IssuesPayload(action="opened")),
            "Opened an issue in user/repo",
        ),
        (
            _event("PullRequestEvent", PullRequestPayload(action="closed")),
            "Closed a pull request in user/repo",
        ),
        (
            _event("WatchEvent", WatchPayload(), repo="torvalds/linux"),
            "Starred torvalds/linux",
        ),
        (_event("ForkEvent", ForkPayload()), "Forked user/repo"),
        (
            _event("CreateEvent", CreatePayload(ref_type="branch")),
            "Created a branch in user/repo",
        ),
        (
            _event("DeleteEvent", DeletePayload(ref_type="tag")),
            "Deleted a tag in user/repo",
        ),
        (
            _event("ReleaseEvent", ReleasePayload(action="published")),
            "Published a release in user/repo",
        ),
        (
            _event("IssueCommentEvent", IssueCommentPayload()),
            "Commented on an issue in user/repo",
        ),
        (
            _event(
                "PullRequestReviewCommentEvent", PullRequestReviewCommentPayload()
            ),
            "Commented on a pull request in user/repo",
        ),
        (
            _event("CommitCommentEvent", CommitCommentPayload()),
            "Commented on a commit in user/repo",
        ),
        (
            _event("GollumEvent", UnrecognizedPayload(kind="GollumEvent")),
            "Performed GollumEvent in user/repo",
        ),
    ],
)
def test_format_event(event: GitHubEvent, expected: str) -> None:
    """Each payload variant renders its own sentence."""
    assert format_event(event) == expected


def test_render_activity_lists_events_under_header() -> None:
    """The listing has a header, a count and one bullet per event."""
    events = [
        _event("PushEvent", PushPayload(commit_count=2)),
        _event("WatchEvent", WatchPayload()),
    ]

    assert render_activity("octocat", events) == [
        "Recent activity for 'octocat':",
        "Found 2 events",
        "",
        "- Pushed 2 commits to user/repo",
        "- Starred user/repo",
    ]


def test_render_activity_uses_singular_for_one_event() -> None:
    """A single event is counted in the singular."""
    lines = render_activity("octocat", [_event("ForkEvent", ForkPayload())])

    assert lines[1] == "Found 1 event"


def test_render_no_activity_names_the_user() -> None:
    """The empty-result explanation mentions the user."""
    lines = render_no_activity("ghost")

    assert lines[0] == "No recent activity found for user 'ghost'"
    assert len(lines) == 5
