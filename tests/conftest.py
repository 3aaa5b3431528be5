"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import pytest

_ENV_VARS = (
    "GH_ACTIVITY_GITHUB_TOKEN",
    "GH_ACTIVITY_API_BASE",
    "GH_ACTIVITY_TIMEOUT_S",
    "GH_ACTIVITY_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment settings out of configuration tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
