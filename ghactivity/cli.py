"""Show a GitHub user's recent public activity."""

from __future__ import annotations

import argparse
import asyncio
import os
import sys

import msgspec

from ghactivity.display import render_activity, render_no_activity
from ghactivity.github import (
    GitHubAPIError,
    GitHubConfigError,
    GitHubEventsClient,
    GitHubEventsConfig,
    GitHubNetworkError,
)
from ghactivity.logging import (
    configure_logging,
    get_logger,
    log_error,
    log_warning,
)
from ghactivity.models import GitHubEvent
from ghactivity.scan import EventStreamShapeError
from ghactivity.service import fetch_user_events
from ghactivity.validation import InvalidUsernameError

logger = get_logger(__name__)

_EXIT_OK = 0
_EXIT_FAILURE = 1

_MIN_LIMIT = 1
_MAX_LIMIT = 100

_FAILURES = (
    InvalidUsernameError,
    GitHubAPIError,
    GitHubNetworkError,
    GitHubConfigError,
    EventStreamShapeError,
)


def _limit(value: str) -> int:
    try:
        limit = int(value)
    except ValueError as exc:
        msg = f"invalid limit {value!r}"
        raise argparse.ArgumentTypeError(msg) from exc
    if not _MIN_LIMIT <= limit <= _MAX_LIMIT:
        msg = f"limit must be between {_MIN_LIMIT} and {_MAX_LIMIT}, got {limit}"
        raise argparse.ArgumentTypeError(msg)
    return limit


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for ``gh-activity``."""
    parser = argparse.ArgumentParser(
        prog="gh-activity",
        description=__doc__,
        epilog="Examples:\n  gh-activity torvalds\n  gh-activity github --json",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("username", help="GitHub username to look up")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the parsed events as JSON instead of text",
    )
    parser.add_argument(
        "--limit",
        type=_limit,
        default=None,
        help="Number of events to request (1-100)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level; defaults to GH_ACTIVITY_LOG_LEVEL or INFO",
    )
    return parser


async def _fetch(
    username: str,
    config: GitHubEventsConfig,
    limit: int | None,
) -> list[GitHubEvent]:
    async with GitHubEventsClient(config) as client:
        return await fetch_user_events(username, client, per_page=limit)


def _print_text(username: str, events: list[GitHubEvent]) -> None:
    lines = (
        render_activity(username, events) if events else render_no_activity(username)
    )
    print("\n".join(lines))


def main(argv: list[str] | None = None) -> int:
    """Fetch, parse and print a user's public activity.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.

    Returns
    -------
    int
        Exit code: 0 on success (including no activity), 1 when validation,
        configuration, network, API or response-shape errors occur.

    """
    args = build_parser().parse_args(argv)

    raw_level = args.log_level or os.environ.get("GH_ACTIVITY_LOG_LEVEL")
    level, invalid = configure_logging(raw_level)
    if invalid and raw_level:
        log_warning(logger, "Unknown log level %r; using %s", raw_level, level)

    username: str = args.username
    try:
        config = GitHubEventsConfig.from_env()
        if not args.json:
            print(f"Fetching recent activity for '{username}'...")
        events = asyncio.run(_fetch(username, config, args.limit))
    except _FAILURES as exc:
        log_error(logger, "gh-activity failed for %r: %s", username, exc)
        print(f"Error: {exc}", file=sys.stderr)
        return _EXIT_FAILURE

    if args.json:
        print(msgspec.json.encode(events).decode("utf-8"))
    else:
        _print_text(username, events)
    return _EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
