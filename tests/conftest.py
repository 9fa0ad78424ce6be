"""
- Give every test its own empty in-memory GameStore
- Override FastAPI's get_store so routes use that store.
- Provide a client fixture (TestClient(app)) that already has the override applied.
"""
import pytest

from fastapi.testclient import TestClient

from jotto.main import app, get_store
from jotto.store import GameStore

@pytest.fixture
def store() -> GameStore:
    return GameStore()

@pytest.fixture(autouse=True)
def override_dep(store):
    """Force the app to use our test store for every request."""
    app.dependency_overrides[get_store] = lambda: store
    yield
    app.dependency_overrides.clear()

@pytest.fixture
def client():
    # This client talks to the FastAPI app in-process. Because we've overridden get_store,
    # every request uses the fresh store from the fixture above.
    return TestClient(app)
