"""Errors raised while scanning event payload text."""

from __future__ import annotations

_PREVIEW_LIMIT = 40


class EventStreamShapeError(ValueError):
    """Raised when a response body is not bracket-delimited as a JSON array."""

    @classmethod
    def not_an_array(cls, text: str) -> EventStreamShapeError:
        """Return an error quoting the start of the rejected buffer."""
        stripped = text.strip()
        if len(stripped) > _PREVIEW_LIMIT:
            preview = stripped[:_PREVIEW_LIMIT] + "..."
        else:
            preview = stripped
        return cls(f"Expected JSON array, got {preview!r}")


class EventExtractionError(ValueError):
    """Raised when one event object lacks a required field.

    :func:`ghactivity.scan.parse_events` catches this per object and drops
    the object; it never reaches callers of the batch entry point.
    """

    def __init__(self, message: str, *, field: str) -> None:
        """Initialise with a message and the dotted name of the missing field."""
        self.field = field
        super().__init__(message)

    @classmethod
    def missing_field(cls, field: str) -> EventExtractionError:
        """Return an error for a required field that could not be extracted."""
        return cls(f"Missing '{field}' field", field=field)
