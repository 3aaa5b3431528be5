"""Split a JSON array buffer into the spans of its top-level objects."""

from __future__ import annotations

from .errors import EventStreamShapeError
from .spans import TextSpan, iter_balanced


def split_top_level_objects(text: str) -> list[TextSpan]:
    """Return a span for each top-level ``{...}`` object inside ``text``.

    Parameters
    ----------
    text : str
        Complete response body expected to hold a JSON array.

    Returns
    -------
    list[TextSpan]
        Brace-balanced object spans in source order. ``[]`` yields an empty
        list. Commas, whitespace and non-object array members are ignored.

    Raises
    ------
    EventStreamShapeError
        If the trimmed buffer does not start with ``[`` and end with ``]``.

    Examples
    --------
    >>> [span.text for span in split_top_level_objects('[{"a":1}, {"b":2}]')]
    ['{"a":1}', '{"b":2}']

    """
    trimmed = TextSpan.of(text).strip()
    if not (trimmed.startswith("[") and trimmed.endswith("]")):
        raise EventStreamShapeError.not_an_array(text)

    content = trimmed.inner().strip()
    if not content:
        return []
    return list(iter_balanced(content))
