"""Assemble typed event records from object spans.

:func:`parse_event` turns one object span into a :class:`GitHubEvent` or
raises :class:`EventExtractionError` when the ``type`` discriminator or
``repo.name`` is missing. :func:`parse_events` is the batch entry point: it
splits the buffer, assembles every object and drops the ones that fail,
keeping the rest in source order.

Payload shapes are chosen through ``_PAYLOAD_BUILDERS``, a single table keyed
by discriminator. Kinds missing from the table become
:class:`UnrecognizedPayload`.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

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

from .errors import EventExtractionError
from .extractors import extract_object, extract_string, extract_unsigned
from .spans import SpanLike, TextSpan, as_span
from .splitter import split_top_level_objects

DEFAULT_COMMIT_COUNT = 1
DEFAULT_ACTION = "unknown"
DEFAULT_RELEASE_ACTION = "published"
DEFAULT_REF_TYPE = "unknown"

PayloadBuilder = cabc.Callable[[TextSpan | None], EventPayload]


def _payload_string(payload: TextSpan | None, key: str, default: str) -> str:
    if payload is None:
        return default
    value = extract_string(payload, key)
    return default if value is None else value


def _push(payload: TextSpan | None) -> EventPayload:
    size = extract_unsigned(payload, "size") if payload is not None else None
    return PushPayload(commit_count=DEFAULT_COMMIT_COUNT if size is None else size)


def _issues(payload: TextSpan | None) -> EventPayload:
    return IssuesPayload(action=_payload_string(payload, "action", DEFAULT_ACTION))


def _pull_request(payload: TextSpan | None) -> EventPayload:
    return PullRequestPayload(
        action=_payload_string(payload, "action", DEFAULT_ACTION)
    )


def _release(payload: TextSpan | None) -> EventPayload:
    return ReleasePayload(
        action=_payload_string(payload, "action", DEFAULT_RELEASE_ACTION)
    )


def _create(payload: TextSpan | None) -> EventPayload:
    return CreatePayload(
        ref_type=_payload_string(payload, "ref_type", DEFAULT_REF_TYPE)
    )


def _delete(payload: TextSpan | None) -> EventPayload:
    return DeletePayload(
        ref_type=_payload_string(payload, "ref_type", DEFAULT_REF_TYPE)
    )


# Kinds that read fields from the nested ``payload`` object.
_PAYLOAD_BUILDERS: dict[str, PayloadBuilder] = {
    "PushEvent": _push,
    "IssuesEvent": _issues,
    "PullRequestEvent": _pull_request,
    "ReleaseEvent": _release,
    "CreateEvent": _create,
    "DeleteEvent": _delete,
}

# Kinds with a fixed, field-less payload.
_EMPTY_PAYLOADS: dict[str, EventPayload] = {
    "WatchEvent": WatchPayload(),
    "ForkEvent": ForkPayload(),
    "IssueCommentEvent": IssueCommentPayload(),
    "PullRequestReviewCommentEvent": PullRequestReviewCommentPayload(),
    "CommitCommentEvent": CommitCommentPayload(),
}

KNOWN_EVENT_KINDS: typ.Final[frozenset[str]] = frozenset(
    _PAYLOAD_BUILDERS.keys() | _EMPTY_PAYLOADS.keys()
)


def build_payload(kind: str, event: SpanLike) -> EventPayload:
    """Return the payload variant for ``kind`` read from an event object.

    Field-less kinds never look at ``event``. A missing ``payload`` object or
    missing sub-field falls back to the documented default.
    """
    empty = _EMPTY_PAYLOADS.get(kind)
    if empty is not None:
        return empty

    builder = _PAYLOAD_BUILDERS.get(kind)
    if builder is None:
        return UnrecognizedPayload(kind=kind)
    return builder(extract_object(event, "payload"))


def parse_event(event: SpanLike) -> GitHubEvent:
    """Assemble one event record from an object span.

    Parameters
    ----------
    event : TextSpan | str
        Brace-balanced span of a single event object.

    Returns
    -------
    GitHubEvent
        The typed record.

    Raises
    ------
    EventExtractionError
        If ``type``, ``repo`` or ``repo.name`` is missing.

    """
    span = as_span(event)
    kind = extract_string(span, "type")
    if kind is None:
        raise EventExtractionError.missing_field("type")

    repo = extract_object(span, "repo")
    if repo is None:
        raise EventExtractionError.missing_field("repo")

    repository = extract_string(repo, "name")
    if repository is None:
        raise EventExtractionError.missing_field("repo.name")

    return GitHubEvent(
        kind=kind,
        repository=repository,
        payload=build_payload(kind, span),
    )


def parse_events(text: str) -> list[GitHubEvent]:
    """Parse a response body holding a JSON array of events.

    Objects missing a required field are skipped; the remaining records keep
    their order from the array.

    Raises
    ------
    EventStreamShapeError
        If ``text`` is not bracket-delimited as a JSON array.

    Examples
    --------
    >>> events = parse_events('[{"type":"WatchEvent","repo":{"name":"a/b"}}]')
    >>> events[0].kind, events[0].repository
    ('WatchEvent', 'a/b')

    """
    events: list[GitHubEvent] = []
    for span in split_top_level_objects(text):
        try:
            events.append(parse_event(span))
        except EventExtractionError:
            continue
    return events


__all__ = [
    "DEFAULT_ACTION",
    "DEFAULT_COMMIT_COUNT",
    "DEFAULT_REF_TYPE",
    "DEFAULT_RELEASE_ACTION",
    "KNOWN_EVENT_KINDS",
    "build_payload",
    "parse_event",
    "parse_events",
]
