"""Dependency-free scanner for the GitHub public events array.

The scanner reads a fixed set of fields straight out of the response text
instead of building a JSON tree:

* :mod:`~ghactivity.scan.spans` - index-based spans and the depth scanner
  every matcher shares.
* :mod:`~ghactivity.scan.splitter` - top-level array splitting.
* :mod:`~ghactivity.scan.extractors` - keyed string, integer, object and
  array-length readers.
* :mod:`~ghactivity.scan.assembler` - typed record assembly and the batch
  entry point.

Quick example::

    >>> from ghactivity.scan import parse_events
    >>> parse_events('[{"type":"PushEvent","repo":{"name":"a/b"},'
    ...              '"payload":{"size":3}}]')[0].payload.commit_count
    3

All functions are pure; the same buffer may be parsed from several threads.
"""

from __future__ import annotations

from .assembler import KNOWN_EVENT_KINDS, build_payload, parse_event, parse_events
from .errors import EventExtractionError, EventStreamShapeError
from .extractors import (
    extract_array_length,
    extract_object,
    extract_string,
    extract_unsigned,
)
from .spans import TextSpan, iter_balanced, iter_depth_changes
from .splitter import split_top_level_objects

__all__ = [
    "KNOWN_EVENT_KINDS",
    "EventExtractionError",
    "EventStreamShapeError",
    "TextSpan",
    "build_payload",
    "extract_array_length",
    "extract_object",
    "extract_string",
    "extract_unsigned",
    "iter_balanced",
    "iter_depth_changes",
    "parse_event",
    "parse_events",
    "split_top_level_objects",
]
