import pytest
from fastapi.testclient import TestClient

from app import app, get_store
from store import TaskStore


@pytest.fixture
def store():
    """A fresh, empty store per test."""
    return TaskStore()


@pytest.fixture
def tasks_file(tmp_path):
    return tmp_path / "tasks.json"


@pytest.fixture
def client(store):
    """
    A TestClient whose get_store dependency is overridden to return the
    per-test store, so tests can inspect it directly after each request.
    """
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app, raise_server_exceptions=True)
    app.dependency_overrides.clear()
