"""Shared test fixtures.

Provides a ``test_client`` for FastAPI, mock Supabase clients and a mocked
``CandidateStore`` for use across all test modules.
"""

import os
from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-anon-key")


def chainable_table_mock() -> MagicMock:
    """Return a mock that supports PostgREST fluent chaining."""
    m = MagicMock()
    for method in (
        "select", "insert", "update", "delete", "eq", "limit",
        "order", "single", "maybe_single",
    ):
        getattr(m, method).return_value = m
    return m


@pytest.fixture()
def mock_store() -> MagicMock:
    """A ``CandidateStore`` double with an empty job and no candidates."""
    from app.services.store import CandidateStore

    store = MagicMock(spec=CandidateStore)
    store.get_job.return_value = None
    store.list_candidates.return_value = []
    return store


@pytest.fixture()
def mock_supabase_module() -> Generator[MagicMock, None, None]:
    """Patch the Supabase client at module level in the health router."""
    mock_client = MagicMock()
    mock_client.table.return_value = chainable_table_mock()
    mock_client.table.return_value.execute.return_value = MagicMock()

    with patch("app.routers.health.get_supabase", return_value=mock_client):
        yield mock_client


@pytest.fixture()
def mock_supabase_disconnected() -> Generator[MagicMock, None, None]:
    """Patch ``get_supabase`` to simulate a disconnected database."""
    with patch(
        "app.routers.health.get_supabase",
        side_effect=Exception("Connection refused"),
    ):
        yield MagicMock()


@pytest.fixture()
def test_client() -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient."""
    from app.main import app

    with TestClient(app) as client:
        yield client
