"""
Shared fixtures.

Store-level tests run against both record store implementations; API
tests get a fresh application with its own in-memory store so no state
leaks between tests.
"""

import pytest
from fastapi.testclient import TestClient

from wedding_planner_api.app.main import create_app
from wedding_planner_api.app.services.memory_store import MemoryRecordStore
from wedding_planner_api.app.services.sqlite_store import SqliteRecordStore


@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path):
    """A fresh record store of each kind."""
    if request.param == "memory":
        return MemoryRecordStore()
    return SqliteRecordStore(str(tmp_path / "planner.db"))


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "local.db")


@pytest.fixture
def client():
    """HTTP client for an app backed by an empty in-memory store."""
    app = create_app(store=MemoryRecordStore())
    with TestClient(app) as test_client:
        yield test_client
