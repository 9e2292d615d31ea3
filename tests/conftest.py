import pytest
from fastapi.testclient import TestClient

from expense_tracker.db import get_store
from expense_tracker.db.store import InMemoryTransactionStore
from expense_tracker.main import app


@pytest.fixture
def store():
    return InMemoryTransactionStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"X-User-Id": "user-1"}
