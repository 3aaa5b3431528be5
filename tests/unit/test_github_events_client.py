"""Unit tests for the GitHub events REST client."""

from __future__ import annotations

import asyncio
import secrets
import typing as typ

import httpx
import pytest

from ghactivity.github import (
    GitHubAPIError,
    GitHubConfigError,
    GitHubEventsClient,
    GitHubEventsConfig,
    GitHubNetworkError,
)

_TOKEN = secrets.token_hex(8)
_NOT_FOUND = 404
_SERVER_ERROR = 502

Handler = typ.Callable[[httpx.Request], httpx.Response]


T = typ.TypeVar("T")


def run_async(coro: typ.Coroutine[typ.Any, typ.Any, T]) -> T:
    """Run a coroutine to completion in a fresh event loop."""
    return asyncio.run(coro)


def _make_client(
    handler: Handler,
    config: GitHubEventsConfig | None = None,
) -> tuple[GitHubEventsClient, httpx.AsyncClient]:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = GitHubEventsClient(
        config or GitHubEventsConfig(api_base="https://example.test"),
        http_client=http_client,
    )
    return client, http_client


def _fetch(client: GitHubEventsClient, username: str, **kwargs: typ.Any) -> str:
    async def _run() -> str:
        async with client:
            return await client.fetch_user_events_text(username, **kwargs)

    return run_async(_run())


class TestFetchUserEventsText:
    """Tests for GitHubEventsClient.fetch_user_events_text."""

    def test_returns_raw_body_and_requests_events_endpoint(self) -> None:
        """The body is returned untouched from GET /users/{user}/events."""
        requests: list[httpx.Request] = []
        body = '[{"type":"WatchEvent","repo":{"name":"a/b"}}]'

        def _handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, text=body)

        client, _ = _make_client(_handler)

        assert _fetch(client, "octocat") == body
        (request,) = requests
        assert request.method == "GET"
        assert str(request.url) == "https://example.test/users/octocat/events"

    def test_sends_identifying_headers_without_token(self) -> None:
        """Anonymous requests carry User-Agent and Accept but no auth."""
        requests: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, text="[]")

        client, _ = _make_client(_handler)
        _fetch(client, "octocat")

        headers = requests[0].headers
        assert headers["User-Agent"] == "gh-activity/0.1"
        assert headers["Accept"] == "application/vnd.github+json"
        assert "Authorization" not in headers

    def test_sends_bearer_token_when_configured(self) -> None:
        """A configured token becomes an Authorization header."""
        requests: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, text="[]")

        config = GitHubEventsConfig(token=_TOKEN, api_base="https://example.test")
        client, _ = _make_client(_handler, config)
        _fetch(client, "octocat")

        assert requests[0].headers["Authorization"] == f"Bearer {_TOKEN}"

    def test_forwards_page_size(self) -> None:
        """per_page is sent as a query parameter."""
        requests: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, text="[]")

        client, _ = _make_client(_handler)
        _fetch(client, "octocat", per_page=10)

        assert requests[0].url.params["per_page"] == "10"

    @pytest.mark.parametrize("per_page", [0, 101])
    def test_rejects_out_of_range_page_size(self, per_page: int) -> None:
        """GitHub only accepts page sizes from 1 to 100."""
        client, _ = _make_client(lambda _request: httpx.Response(200, text="[]"))

        with pytest.raises(GitHubConfigError, match="page size"):
            _fetch(client, "octocat", per_page=per_page)

    @pytest.mark.parametrize("status", [_NOT_FOUND, _SERVER_ERROR])
    def test_error_status_raises_api_error(self, status: int) -> None:
        """4xx and 5xx responses raise GitHubAPIError with the body."""
        client, _ = _make_client(
            lambda _request: httpx.Response(status, text='{"message":"Not Found"}')
        )

        with pytest.raises(GitHubAPIError) as excinfo:
            _fetch(client, "ghost")

        assert excinfo.value.status_code == status
        assert f"status {status}" in str(excinfo.value)
        assert "Not Found" in str(excinfo.value)

    def test_transport_failure_raises_network_error(self) -> None:
        """Connection failures become GitHubNetworkError."""

        def _handler(request: httpx.Request) -> httpx.Response:
            msg = "connection refused"
            raise httpx.ConnectError(msg, request=request)

        client, _ = _make_client(_handler)

        with pytest.raises(GitHubNetworkError, match="connection refused"):
            _fetch(client, "octocat")

    def test_timeout_raises_network_error(self) -> None:
        """Timeouts become GitHubNetworkError naming the limit."""

        def _handler(request: httpx.Request) -> httpx.Response:
            msg = "read timed out"
            raise httpx.ReadTimeout(msg, request=request)

        config = GitHubEventsConfig(api_base="https://example.test", timeout_s=2.5)
        client, _ = _make_client(_handler, config)

        with pytest.raises(GitHubNetworkError, match=r"timed out after 2\.5s"):
            _fetch(client, "octocat")

    def test_injected_http_client_is_left_open(self) -> None:
        """The client only closes HTTP clients it created itself."""
        client, http_client = _make_client(
            lambda _request: httpx.Response(200, text="[]")
        )

        _fetch(client, "octocat")

        assert not http_client.is_closed
        run_async(http_client.aclose())


class TestGitHubEventsConfig:
    """Tests for GitHubEventsConfig.from_env."""

    def test_defaults_without_environment(self) -> None:
        """With nothing set, requests are anonymous against api.github.com."""
        config = GitHubEventsConfig.from_env()

        assert config.token is None
        assert config.api_base == "https://api.github.com"
        assert config.timeout_s == pytest.approx(20.0)

    def test_reads_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment overrides are stripped and applied."""
        monkeypatch.setenv("GH_ACTIVITY_GITHUB_TOKEN", f"  {_TOKEN}  ")
        monkeypatch.setenv("GH_ACTIVITY_API_BASE", "https://ghe.example.test/api/v3/")
        monkeypatch.setenv("GH_ACTIVITY_TIMEOUT_S", "5")

        config = GitHubEventsConfig.from_env()

        assert config.token == _TOKEN
        assert config.api_base == "https://ghe.example.test/api/v3"
        assert config.timeout_s == pytest.approx(5.0)

    def test_blank_token_means_anonymous(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A whitespace-only token is ignored."""
        monkeypatch.setenv("GH_ACTIVITY_GITHUB_TOKEN", "   ")

        config = GitHubEventsConfig.from_env()

        assert config.token is None
        assert "Authorization" not in config.headers()

    @pytest.mark.parametrize("value", ["soon", "0", "-3", "nan"])
    def test_rejects_invalid_timeout(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        """Timeouts must parse as positive numbers."""
        monkeypatch.setenv("GH_ACTIVITY_TIMEOUT_S", value)

        with pytest.raises(GitHubConfigError, match="GH_ACTIVITY_TIMEOUT_S"):
            GitHubEventsConfig.from_env()

    def test_rejects_api_base_without_scheme(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The API base must be an http(s) URL."""
        monkeypatch.setenv("GH_ACTIVITY_API_BASE", "api.github.com")

        with pytest.raises(GitHubConfigError, match="GH_ACTIVITY_API_BASE"):
            GitHubEventsConfig.from_env()
