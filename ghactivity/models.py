"""Typed event records produced from the GitHub public events feed.

Each record carries the raw discriminator (``kind``), the repository slug and
one payload variant. The variant set is closed: every discriminator maps to
exactly one payload type, with :class:`UnrecognizedPayload` catching any kind
the assembler does not know.

Variants are tagged msgspec structs, so a list of records encodes to JSON
with a ``type`` field naming the payload shape.
"""

from __future__ import annotations

import msgspec


class PushPayload(msgspec.Struct, kw_only=True, frozen=True, tag="push"):
    """Commits pushed to a branch.

    Attributes
    ----------
    commit_count : int
        Number of commits in the push.

    """

    commit_count: int


class IssuesPayload(msgspec.Struct, kw_only=True, frozen=True, tag="issues"):
    """Issue lifecycle change such as ``opened`` or ``closed``."""

    action: str


class PullRequestPayload(
    msgspec.Struct, kw_only=True, frozen=True, tag="pull_request"
):
    """Pull request lifecycle change such as ``opened`` or ``closed``."""

    action: str


class CreatePayload(msgspec.Struct, kw_only=True, frozen=True, tag="create"):
    """Branch, tag or repository creation; ``ref_type`` names which."""

    ref_type: str


class DeletePayload(msgspec.Struct, kw_only=True, frozen=True, tag="delete"):
    """Branch or tag deletion; ``ref_type`` names which."""

    ref_type: str


class ReleasePayload(msgspec.Struct, kw_only=True, frozen=True, tag="release"):
    """Release change such as ``published``."""

    action: str


class WatchPayload(msgspec.Struct, frozen=True, tag="watch"):
    """Repository starred."""


class ForkPayload(msgspec.Struct, frozen=True, tag="fork"):
    """Repository forked."""


class IssueCommentPayload(msgspec.Struct, frozen=True, tag="issue_comment"):
    """Comment on an issue."""


class PullRequestReviewCommentPayload(
    msgspec.Struct, frozen=True, tag="pull_request_review_comment"
):
    """Review comment on a pull request."""


class CommitCommentPayload(msgspec.Struct, frozen=True, tag="commit_comment"):
    """Comment on a commit."""


class UnrecognizedPayload(
    msgspec.Struct, kw_only=True, frozen=True, tag="unrecognized"
):
    """Catch-all for event kinds outside the known set.

    Attributes
    ----------
    kind : str
        The original discriminator, kept for display.

    """

    kind: str


EventPayload = (
    PushPayload
    | IssuesPayload
    | PullRequestPayload
    | CreatePayload
    | DeletePayload
    | ReleasePayload
    | WatchPayload
    | ForkPayload
    | IssueCommentPayload
    | PullRequestReviewCommentPayload
    | CommitCommentPayload
    | UnrecognizedPayload
)


class GitHubEvent(msgspec.Struct, kw_only=True, frozen=True):
    """One activity record from a user's public events feed.

    Attributes
    ----------
    kind : str
        Discriminator from the event's ``type`` field, e.g. ``PushEvent``.
    repository : str
        Repository slug in ``owner/name`` form.
    payload : EventPayload
        Variant selected by ``kind``.

    """

    kind: str
    repository: str
    payload: EventPayload


__all__ = [
    "CommitCommentPayload",
    "CreatePayload",
    "DeletePayload",
    "EventPayload",
    "ForkPayload",
    "GitHubEvent",
    "IssueCommentPayload",
    "IssuesPayload",
    "PullRequestPayload",
    "PullRequestReviewCommentPayload",
    "PushPayload",
    "ReleasePayload",
    "UnrecognizedPayload",
    "WatchPayload",
]
