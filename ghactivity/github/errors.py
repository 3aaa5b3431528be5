"""Errors raised while talking to the GitHub REST API."""

from __future__ import annotations

# Longest response body quoted in an API error message.
_BODY_PREVIEW_LIMIT = 200


class GitHubAPIError(RuntimeError):
    """Raised when GitHub answers with a non-2xx status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        """Initialise with a message and optional HTTP status code."""
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def http_error(cls, status_code: int, body: str = "") -> GitHubAPIError:
        """Return an error for a non-2xx response, quoting its body."""
        detail = body.strip() or "Unknown error"
        if len(detail) > _BODY_PREVIEW_LIMIT:
            detail = detail[:_BODY_PREVIEW_LIMIT] + "..."
        return cls(
            f"GitHub API error (status {status_code}): {detail}",
            status_code=status_code,
        )


class GitHubNetworkError(RuntimeError):
    """Raised when a request never produced an HTTP response."""

    @classmethod
    def transport(cls, detail: str) -> GitHubNetworkError:
        """Return an error for DNS, connection or TLS failures."""
        return cls(f"Network error: {detail}")

    @classmethod
    def timeout(cls, timeout_s: float) -> GitHubNetworkError:
        """Return an error for a request that exceeded its timeout."""
        return cls(f"Network error: request timed out after {timeout_s:g}s")


class GitHubConfigError(RuntimeError):
    """Raised when GitHub client configuration is invalid."""

    @classmethod
    def invalid_timeout(cls, value: str) -> GitHubConfigError:
        """Return an error for a timeout that is not a positive number."""
        return cls(
            f"Invalid GH_ACTIVITY_TIMEOUT_S {value!r}: must be a positive number"
        )

    @classmethod
    def invalid_api_base(cls, value: str) -> GitHubConfigError:
        """Return an error for an API base URL without an http(s) scheme."""
        return cls(
            f"Invalid GH_ACTIVITY_API_BASE {value!r}: must start with "
            "http:// or https://"
        )

    @classmethod
    def invalid_per_page(cls, value: int) -> GitHubConfigError:
        """Return an error for a page size GitHub would reject."""
        return cls(f"Invalid page size {value}: must be between 1 and 100")
