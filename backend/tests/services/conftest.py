"""Service test fixtures — fresh stores over in-memory SQLite or process memory.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the schema created
    - `store` runs each contract test once per backend

Design Decisions:
    - SQLite in-memory: fast, no external dependency, same SQLAlchemy code path as production
"""

import pytest

from itemstore.infrastructure.database import DatabaseSessionManager
from itemstore.services.memory_item_store import InMemoryItemStore
from itemstore.services.sql_item_store import SqlItemStore

MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager(MEMORY_URL)
    await manager.create_schema()
    yield manager
    await manager.dispose()


@pytest.fixture
async def bare_db_manager():
    """Session manager whose database has no `items` table."""
    manager = DatabaseSessionManager(MEMORY_URL)
    yield manager
    await manager.dispose()


@pytest.fixture
def sql_store(db_manager):
    return SqlItemStore(db_manager)


@pytest.fixture(params=["memory", "sql"])
async def store(request):
    if request.param == "memory":
        yield InMemoryItemStore()
    else:
        manager = DatabaseSessionManager(MEMORY_URL)
        await manager.create_schema()
        yield SqlItemStore(manager)
        await manager.dispose()
