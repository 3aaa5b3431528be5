"""Index-based text views and the shared delimiter depth scanner.

Scanning never slices the input buffer. A :class:`TextSpan` records a
``[start, end)`` window into the original string and only materializes a
substring through :attr:`TextSpan.text` once a value has to outlive the scan.

Every brace and bracket matcher in :mod:`ghactivity.scan` is built on
:func:`iter_depth_changes`, which walks a span once and reports each
structural delimiter together with the nesting depth after it. String
literals are skipped while counting, so a ``{`` inside a quoted value never
moves the depth.

Usage
-----
>>> from ghactivity.scan.spans import TextSpan, iter_balanced
>>> [s.text for s in iter_balanced(TextSpan.of('{"a":1}, {"b":"}"}'))]
['{"a":1}', '{"b":"}"}']

"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses
import typing as typ

_QUOTE = '"'
_BACKSLASH = "\\"


@dataclasses.dataclass(frozen=True, slots=True)
class TextSpan:
    """Read-only window ``source[start:end]`` over an input buffer."""

    source: str
    start: int
    end: int

    def __post_init__(self) -> None:
        """Reject windows that fall outside ``source``."""
        if not 0 <= self.start <= self.end <= len(self.source):
            msg = (
                f"span [{self.start}, {self.end}) lies outside a source of "
                f"length {len(self.source)}"
            )
            raise ValueError(msg)

    @classmethod
    def of(cls, text: str) -> TextSpan:
        """Return a span covering the whole of ``text``."""
        return cls(text, 0, len(text))

    @property
    def text(self) -> str:
        """Materialize the covered substring."""
        return self.source[self.start : self.end]

    def __len__(self) -> int:
        """Return the number of characters covered."""
        return self.end - self.start

    def __str__(self) -> str:
        """Return the covered substring."""
        return self.text

    def startswith(self, prefix: str) -> bool:
        """Return True when the span begins with ``prefix``."""
        return self.source.startswith(prefix, self.start, self.end)

    def endswith(self, suffix: str) -> bool:
        """Return True when the span ends with ``suffix``."""
        return self.source.endswith(suffix, self.start, self.end)

    def find(self, pattern: str) -> int:
        """Return the absolute index of ``pattern`` inside the span, or -1."""
        return self.source.find(pattern, self.start, self.end)

    def after(self, index: int) -> TextSpan:
        """Return the tail of the span from absolute ``index`` onwards."""
        return TextSpan(self.source, index, self.end)

    def inner(self) -> TextSpan:
        """Return the span without its first and last character."""
        if len(self) < 2:  # noqa: PLR2004 - a pair of delimiters
            return TextSpan(self.source, self.start, self.start)
        return TextSpan(self.source, self.start + 1, self.end - 1)

    def lstrip(self) -> TextSpan:
        """Return the span with leading whitespace skipped."""
        start = self.start
        while start < self.end and self.source[start].isspace():
            start += 1
        return TextSpan(self.source, start, self.end)

    def strip(self) -> TextSpan:
        """Return the span with surrounding whitespace skipped."""
        head = self.lstrip()
        end = head.end
        while end > head.start and self.source[end - 1].isspace():
            end -= 1
        return TextSpan(self.source, head.start, end)


SpanLike = TextSpan | str


def as_span(value: SpanLike) -> TextSpan:
    """Return ``value`` as a span, wrapping plain strings whole."""
    if isinstance(value, TextSpan):
        return value
    return TextSpan.of(value)


class DepthChange(typ.NamedTuple):
    """A structural delimiter and the nesting depth just after it."""

    index: int
    char: str
    depth: int


def _skip_string_literal(source: str, index: int, end: int) -> int:
    """Return the index just past the literal opening at ``index``.

    A backslash consumes the character after it. An unterminated literal
    runs to ``end``.
    """
    index += 1
    while index < end:
        char = source[index]
        if char == _BACKSLASH:
            index += 2
            continue
        if char == _QUOTE:
            return index + 1
        index += 1
    return end


def iter_depth_changes(
    span: TextSpan,
    *,
    opening: str,
    closing: str,
) -> cabc.Iterator[DepthChange]:
    """Yield every structural delimiter in ``span`` with its resulting depth.

    Parameters
    ----------
    span : TextSpan
        Region to scan.
    opening : str
        Characters that increase the depth by one.
    closing : str
        Characters that decrease the depth by one.

    Yields
    ------
    DepthChange
        One entry per delimiter outside string literals. A closing
        delimiter at depth zero is ignored, so depth never goes negative.

    """
    source = span.source
    end = span.end
    depth = 0
    index = span.start
    while index < end:
        char = source[index]
        if char == _QUOTE:
            index = _skip_string_literal(source, index, end)
            continue
        if char in opening:
            depth += 1
            yield DepthChange(index, char, depth)
        elif char in closing and depth > 0:
            depth -= 1
            yield DepthChange(index, char, depth)
        index += 1


def iter_balanced(
    span: TextSpan,
    *,
    opening: str = "{",
    closing: str = "}",
) -> cabc.Iterator[TextSpan]:
    """Yield each delimited region whose depth returns to zero.

    The yielded spans run from the opening delimiter through its matching
    closing delimiter, inclusive. A region still open when ``span`` ends is
    not yielded.
    """
    start = span.start
    for change in iter_depth_changes(span, opening=opening, closing=closing):
        if change.depth == 1 and change.char in opening:
            start = change.index
        elif change.depth == 0:
            yield TextSpan(span.source, start, change.index + 1)


__all__ = [
    "DepthChange",
    "SpanLike",
    "TextSpan",
    "as_span",
    "iter_balanced",
    "iter_depth_changes",
]
