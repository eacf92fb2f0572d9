"""API test fixtures — FastAPI test client wired to a fresh store.

Invariants:
    - get_item_store / get_db_manager dependencies overridden per test
    - Lifespan is not run: no settings-driven database is opened

Design Decisions:
    - httpx AsyncClient + ASGITransport: exercises routing, validation and error handlers
"""

import pytest
from httpx import ASGITransport, AsyncClient

from itemstore.api.dependencies import get_db_manager, get_item_store
from itemstore.main import app
from itemstore.services.memory_item_store import InMemoryItemStore


@pytest.fixture
def item_store():
    return InMemoryItemStore()


@pytest.fixture
def db_manager_override():
    return None


@pytest.fixture
async def client(item_store, db_manager_override):
    app.dependency_overrides[get_item_store] = lambda: item_store
    app.dependency_overrides[get_db_manager] = lambda: db_manager_override
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
