"""Field extractors that read one keyed value out of an object span.

Each extractor looks for the first literal ``"<key>":`` in the span, skips
whitespace after the colon and reads a single value. A missing key or a value
of the wrong shape returns ``None``: absence is an ordinary outcome here and
callers decide whether it matters.
"""

from __future__ import annotations

from .spans import SpanLike, TextSpan, as_span, iter_balanced, iter_depth_changes

_ASCII_DIGITS = frozenset("0123456789")

# Values beyond an unsigned 64-bit integer read as absent.
_MAX_UNSIGNED = 2**64 - 1


def _locate_value(span: TextSpan, key: str) -> TextSpan | None:
    """Return the span following ``"<key>":`` with leading whitespace skipped."""
    pattern = f'"{key}":'
    found = span.find(pattern)
    if found < 0:
        return None
    return span.after(found + len(pattern)).lstrip()


def extract_string(span: SpanLike, key: str) -> str | None:
    r"""Return the raw string value stored under ``key``.

    The value ends at the first ``"`` not immediately preceded by a
    backslash. Escape sequences are returned untranslated, so
    ``"say \"hi\""`` yields ``say \"hi\"``. An unterminated value runs to
    the end of the span.

    Examples
    --------
    >>> extract_string('{"type": "PushEvent"}', "type")
    'PushEvent'
    >>> extract_string('{"id": 7}', "id") is None
    True

    """
    value = _locate_value(as_span(span), key)
    if value is None or not value.startswith('"'):
        return None

    source = value.source
    start = value.start + 1
    index = start
    while index < value.end:
        if source[index] == '"' and source[index - 1] != "\\":
            break
        index += 1
    return source[start:index]


def extract_unsigned(span: SpanLike, key: str) -> int | None:
    """Return the unsigned integer stored under ``key``.

    Reads the longest run of ASCII digits after the colon. No digits, or a
    value that overflows 64 bits, returns ``None``. Signs, fractions and
    exponents are not recognised.
    """
    value = _locate_value(as_span(span), key)
    if value is None:
        return None

    source = value.source
    index = value.start
    while index < value.end and source[index] in _ASCII_DIGITS:
        index += 1
    if index == value.start:
        return None

    number = int(source[value.start : index])
    return number if number <= _MAX_UNSIGNED else None


def extract_object(span: SpanLike, key: str) -> TextSpan | None:
    """Return the span of the object stored under ``key``.

    The span runs from the opening brace through its matching closing brace,
    across any further nesting. A non-object value or an unbalanced object
    returns ``None``.

    Examples
    --------
    >>> extract_object('{"repo": {"name": "a/b"}}', "repo").text
    '{"name": "a/b"}'

    """
    value = _locate_value(as_span(span), key)
    if value is None or not value.startswith("{"):
        return None
    return next(iter_balanced(value), None)


def extract_array_length(span: SpanLike, key: str) -> int | None:
    """Return how many objects sit directly inside the array under ``key``.

    Only objects one level inside the array's own brackets are counted;
    deeper objects and non-object members are not. An empty array counts
    ``0``. A non-array value returns ``None``.

    Examples
    --------
    >>> extract_array_length('{"commits": [{"sha": "a"}, {"sha": "b"}]}', "commits")
    2

    """
    value = _locate_value(as_span(span), key)
    if value is None or not value.startswith("["):
        return None

    count = 0
    for change in iter_depth_changes(value, opening="[{", closing="]}"):
        if change.depth == 0:
            break
        if change.char == "{" and change.depth == 2:  # noqa: PLR2004 - array then object
            count += 1
    return count


__all__ = [
    "extract_array_length",
    "extract_object",
    "extract_string",
    "extract_unsigned",
]
