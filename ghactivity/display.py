"""Human-readable rendering of parsed activity.

Usage
-----
>>> from ghactivity.display import format_event
>>> from ghactivity.models import GitHubEvent, PushPayload
>>> format_event(
...     GitHubEvent(
...         kind="PushEvent",
...         repository="a/b",
...         payload=PushPayload(commit_count=3),
...     )
... )
'Pushed 3 commits to a/b'

"""

from __future__ import annotations

import typing as typ

from ghactivity.models import (
    CommitCommentPayload,
    CreatePayload,
    DeletePayload,
    ForkPayload,
    IssueCommentPayload,
    IssuesPayload,
    PullRequestPayload,
    PullRequestReviewCommentPayload,
    PushPayload,
    ReleasePayload,
    UnrecognizedPayload,
    WatchPayload,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from ghactivity.models import GitHubEvent


def _plural(count: int, noun: str) -> str:
    return noun if count == 1 else f"{noun}s"


def capitalize_first(text: str) -> str:
    """Upper-case the first character of ``text`` and keep the rest."""
    return text[:1].upper() + text[1:]


def format_event(event: GitHubEvent) -> str:
    """Return a one-line description of ``event``."""
    repo = event.repository
    match event.payload:
        case PushPayload(commit_count=count):
            return f"Pushed {count} {_plural(count, 'commit')} to {repo}"
        case IssuesPayload(action=action):
            return f"{capitalize_first(action)} an issue in {repo}"
        case PullRequestPayload(action=action):
            return f"{capitalize_first(action)} a pull request in {repo}"
        case WatchPayload():
            return f"Starred {repo}"
        case ForkPayload():
            return f"Forked {repo}"
        case CreatePayload(ref_type=ref_type):
            return f"Created a {ref_type} in {repo}"
        case DeletePayload(ref_type=ref_type):
            return f"Deleted a {ref_type} in {repo}"
        case ReleasePayload(action=action):
            return f"{capitalize_first(action)} a release in {repo}"
        case IssueCommentPayload():
            return f"Commented on an issue in {repo}"
        case PullRequestReviewCommentPayload():
            return f"Commented on a pull request in {repo}"
        case CommitCommentPayload():
            return f"Commented on a commit in {repo}"
        case UnrecognizedPayload(kind=kind):
            return f"Performed {kind} in {repo}"
        case _:  # pragma: no cover - the payload union is closed
            typ.assert_never(event.payload)


def render_activity(username: str, events: cabc.Sequence[GitHubEvent]) -> list[str]:
    """Return the header and bullet lines for a non-empty activity listing."""
    count = len(events)
    lines = [
        f"Recent activity for '{username}':",
        f"Found {count} {_plural(count, 'event')}",
        "",
    ]
    lines.extend(f"- {format_event(event)}" for event in events)
    return lines


def render_no_activity(username: str) -> list[str]:
    """Return the explanation printed when a user has no public events."""
    return [
        f"No recent activity found for user '{username}'",
        "This could mean:",
        "  - The user has no public activity in the last 90 days",
        "  - The user doesn't exist",
        "  - The user has made their activity private",
    ]
