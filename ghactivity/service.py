"""Fetch and parse a user's recent public activity."""

from __future__ import annotations

import typing as typ

from ghactivity.logging import get_logger, log_info, log_warning
from ghactivity.scan import parse_events, split_top_level_objects
from ghactivity.validation import validate_username

if typ.TYPE_CHECKING:
    from ghactivity.github import GitHubEventsClient
    from ghactivity.models import GitHubEvent

logger = get_logger(__name__)


async def fetch_user_events(
    username: str,
    client: GitHubEventsClient,
    *,
    per_page: int | None = None,
) -> list[GitHubEvent]:
    """Validate ``username``, fetch its events feed and parse it.

    Parameters
    ----------
    username
        GitHub login to look up.
    client
        Client used to retrieve the raw feed.
    per_page
        Optional page size forwarded to the API.

    Returns
    -------
    list[GitHubEvent]
        Parsed records in feed order. Objects missing required fields are
        left out.

    Raises
    ------
    InvalidUsernameError
        If ``username`` is not shaped like a GitHub login.
    GitHubAPIError, GitHubNetworkError
        If the feed could not be retrieved.
    EventStreamShapeError
        If the response body is not a JSON array.

    """
    validate_username(username)
    text = await client.fetch_user_events_text(username, per_page=per_page)
    events = parse_events(text)

    skipped = len(split_top_level_objects(text)) - len(events)
    if skipped:
        log_warning(
            logger,
            "Skipped %d malformed event object(s) for %s",
            skipped,
            username,
        )
    log_info(logger, "Parsed %d event(s) for %s", len(events), username)
    return events
