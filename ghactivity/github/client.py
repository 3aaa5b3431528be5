"""GitHub REST client for a user's public events feed.

The client only retrieves text. It returns the raw response body so the
scanner in :mod:`ghactivity.scan` can read it without building a JSON tree;
transport failures, authentication headers and status codes are handled here
and nowhere else.
"""

from __future__ import annotations

import dataclasses
import os
import typing as typ

import httpx

from ghactivity.logging import get_logger, log_debug

from .errors import GitHubAPIError, GitHubConfigError, GitHubNetworkError

logger = get_logger(__name__)

_DEFAULT_API_BASE = "https://api.github.com"
_DEFAULT_TIMEOUT_S = 20.0
_DEFAULT_USER_AGENT = "gh-activity/0.1"
_GITHUB_MEDIA_TYPE = "application/vnd.github+json"

_MIN_PER_PAGE = 1
_MAX_PER_PAGE = 100

_HTTP_ERROR_STATUS_THRESHOLD = 400


@dataclasses.dataclass(frozen=True, slots=True)
class GitHubEventsConfig:
    """Configuration for :class:`GitHubEventsClient`.

    Attributes
    ----------
    token
        Optional bearer token. Anonymous requests work but are rate limited
        more tightly.
    api_base
        REST API root without a trailing slash.
    timeout_s
        Request timeout in seconds.
    user_agent
        ``User-Agent`` header; GitHub rejects requests without one.

    """

    token: str | None = None
    api_base: str = _DEFAULT_API_BASE
    timeout_s: float = _DEFAULT_TIMEOUT_S
    user_agent: str = _DEFAULT_USER_AGENT

    @staticmethod
    def _parse_timeout_from_env() -> float:
        raw_timeout = os.environ.get("GH_ACTIVITY_TIMEOUT_S")
        if raw_timeout is None:
            return _DEFAULT_TIMEOUT_S

        try:
            timeout_s = float(raw_timeout)
        except ValueError as exc:
            raise GitHubConfigError.invalid_timeout(raw_timeout) from exc

        if not timeout_s > 0:
            raise GitHubConfigError.invalid_timeout(raw_timeout)
        return timeout_s

    @staticmethod
    def _parse_api_base_from_env() -> str:
        raw_base = os.environ.get("GH_ACTIVITY_API_BASE", _DEFAULT_API_BASE).strip()
        if not raw_base.startswith(("http://", "https://")):
            raise GitHubConfigError.invalid_api_base(raw_base)
        return raw_base.rstrip("/")

    @classmethod
    def from_env(cls) -> GitHubEventsConfig:
        """Build configuration from environment variables.

        Reads ``GH_ACTIVITY_GITHUB_TOKEN`` (optional, blank means anonymous),
        ``GH_ACTIVITY_API_BASE`` and ``GH_ACTIVITY_TIMEOUT_S``.

        Raises
        ------
        GitHubConfigError
            If the API base or timeout is invalid.

        """
        token = os.environ.get("GH_ACTIVITY_GITHUB_TOKEN", "").strip() or None
        return cls(
            token=token,
            api_base=cls._parse_api_base_from_env(),
            timeout_s=cls._parse_timeout_from_env(),
        )

    def headers(self) -> dict[str, str]:
        """Return the request headers implied by this configuration."""
        headers = {
            "User-Agent": self.user_agent,
            "Accept": _GITHUB_MEDIA_TYPE,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers


class GitHubEventsClient:
    """Fetch the raw public events feed for a GitHub user."""

    def __init__(
        self,
        config: GitHubEventsConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialise the client, creating an HTTP client unless one is given."""
        self._config = config
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=config.timeout_s,
            headers=config.headers(),
        )

    async def __aenter__(self) -> typ.Self:
        """Return the client for use in ``async with``."""
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        """Close owned HTTP resources on exit."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            await self._client.aclose()

    def events_url(self, username: str) -> str:
        """Return the public events endpoint for ``username``."""
        return f"{self._config.api_base}/users/{username}/events"

    async def fetch_user_events_text(
        self,
        username: str,
        *,
        per_page: int | None = None,
    ) -> str:
        """Return the response body of ``GET /users/{username}/events``.

        Parameters
        ----------
        username
            Already-validated GitHub login.
        per_page
            Optional page size between 1 and 100.

        Raises
        ------
        GitHubConfigError
            If ``per_page`` is out of range.
        GitHubNetworkError
            If the request failed or timed out before a response arrived.
        GitHubAPIError
            If GitHub answered with a 4xx or 5xx status.

        """
        params: dict[str, int] = {}
        if per_page is not None:
            if not _MIN_PER_PAGE <= per_page <= _MAX_PER_PAGE:
                raise GitHubConfigError.invalid_per_page(per_page)
            params["per_page"] = per_page

        url = self.events_url(username)
        log_debug(logger, "GET %s params=%s", url, params)
        try:
            response = await self._client.get(
                url,
                params=params or None,
                headers=self._config.headers(),
            )
        except httpx.TimeoutException as exc:
            raise GitHubNetworkError.timeout(self._config.timeout_s) from exc
        except httpx.TransportError as exc:
            raise GitHubNetworkError.transport(str(exc)) from exc

        if response.status_code >= _HTTP_ERROR_STATUS_THRESHOLD:
            raise GitHubAPIError.http_error(response.status_code, response.text)
        return response.text
