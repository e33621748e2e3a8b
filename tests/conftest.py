"""Pytest fixtures for maptel tests."""

import pytest
from fastapi.testclient import TestClient

from maptel.main import create_app
from maptel.store import TableStore


@pytest.fixture
def store():
    """Create a fresh, empty table store."""
    return TableStore()


@pytest.fixture
def table_id(store):
    """Create an empty table in the store."""
    return store.create()


@pytest.fixture
def client():
    """HTTP client for an app with its own table store."""
    return TestClient(create_app())
