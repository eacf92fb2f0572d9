"""Request Dependencies — hand the lifespan-built store and DB manager to routes.

Invariants:
    - Store and session manager are created once in the lifespan and live on app.state
    - Routes never construct stores themselves

Design Decisions:
    - app.state over module singletons: explicit wiring, overridable in tests
      via app.dependency_overrides
"""

from fastapi import Request

from itemstore.core.repository_protocols import ItemStore
from itemstore.infrastructure.database import DatabaseSessionManager


def get_item_store(request: Request) -> ItemStore:
    store = getattr(request.app.state, "item_store", None)
    if store is None:
        raise RuntimeError("Item store not initialized")
    return store


def get_db_manager(request: Request) -> DatabaseSessionManager | None:
    return getattr(request.app.state, "db_manager", None)
