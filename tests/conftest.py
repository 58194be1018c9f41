"""Pytest configuration and shared fixtures for vesselapi tests."""

import os
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear VESSELAPI_* environment variables before each test.

    This prevents a developer's real credentials from leaking into tests.
    """
    for key in list(os.environ.keys()):
        if key.startswith("VESSELAPI_"):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def sleeps():
    """Record backoff delays instead of sleeping.

    Yields the list of delays passed to ``asyncio.sleep``.
    """
    delays: list[float] = []

    async def fake_sleep(delay, result=None):
        delays.append(delay)
        return result

    with patch("asyncio.sleep", new=fake_sleep):
        yield delays


@pytest.fixture
def api_key() -> str:
    return "test-key"
