"""Shared fixtures for BDD feature tests."""

from __future__ import annotations

import pytest

from tests.helpers.fake_logger import FakeLogger


@pytest.fixture(autouse=True)
def quiet_service_logger(monkeypatch: pytest.MonkeyPatch) -> FakeLogger:
    """Capture service log output instead of writing it to stderr."""
    logger = FakeLogger()
    monkeypatch.setattr("ghactivity.service.logger", logger)
    return logger
