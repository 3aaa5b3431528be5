"""Run the gh-activity CLI with ``python -m ghactivity``."""

from __future__ import annotations

from ghactivity.cli import main

raise SystemExit(main())
