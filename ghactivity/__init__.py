"""gh-activity: recent public GitHub activity for a user.

The package is split into a pure text scanner and the pieces around it:

* :mod:`ghactivity.scan` - reads event records straight from the response
  text without a JSON tree.
* :mod:`ghactivity.github` - httpx client for ``/users/{user}/events``.
* :mod:`ghactivity.display` and :mod:`ghactivity.cli` - rendering and the
  ``gh-activity`` command.

Example:
>>> from ghactivity import parse_events
>>> [e.kind for e in parse_events('[{"type":"ForkEvent","repo":{"name":"a/b"}}]')]
['ForkEvent']

"""

from __future__ import annotations

from .models import GitHubEvent
from .scan import EventStreamShapeError, parse_events

__all__ = ["EventStreamShapeError", "GitHubEvent", "parse_events"]
