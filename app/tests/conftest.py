import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.db.Connection import database
from app.db.store import MappingStore


@pytest.fixture
def store():
    """Creates a fresh mapping store for each test."""
    return MappingStore()


@pytest.fixture
def client(store):
    """Creates a test client with overridden store dependency."""
    def override_get_store():
        return store

    app.dependency_overrides[database.get_store] = override_get_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_urls():
    """Provides sample URLs for testing."""
    return [
        "https://example.com/test1",
        "https://google.com/search?q=test",
        "https://github.com/user/repo",
    ]
