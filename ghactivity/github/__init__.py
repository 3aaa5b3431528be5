"""GitHub REST client for public user events."""

from __future__ import annotations

from .client import GitHubEventsClient, GitHubEventsConfig
from .errors import GitHubAPIError, GitHubConfigError, GitHubNetworkError

__all__ = [
    "GitHubAPIError",
    "GitHubConfigError",
    "GitHubEventsClient",
    "GitHubEventsConfig",
    "GitHubNetworkError",
]
