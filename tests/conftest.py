"""Pytest configuration and shared fixtures for df-client tests."""

import pytest

import df_client.client
from df_client.testing import RecordingHandler, make_client, rows_response


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear API key environment variables before each test.

    This prevents test pollution when testing credential resolution.
    """
    import os

    test_prefixes = ("DF_", "TEST_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture(autouse=True)
def reset_shared_client(monkeypatch):
    """Each test starts without a shared client."""
    monkeypatch.setattr(df_client.client, "_instance", None)
    yield


@pytest.fixture
def empty_rows_handler():
    """Handler answering every request with an empty rows envelope."""
    return RecordingHandler(lambda request: rows_response([]))


@pytest.fixture
async def client(empty_rows_handler):
    async with make_client(empty_rows_handler) as client:
        yield client
