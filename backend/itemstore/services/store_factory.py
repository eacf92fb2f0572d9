"""Store Factory — picks the ItemStore implementation named by settings."""

import logging

from itemstore.config import Settings
from itemstore.core.domain_types import StoreBackend
from itemstore.core.item import Clock, utc_now
from itemstore.core.repository_protocols import ItemStore
from itemstore.infrastructure.database import DatabaseSessionManager
from itemstore.services.memory_item_store import InMemoryItemStore
from itemstore.services.sql_item_store import SqlItemStore

logger = logging.getLogger(__name__)


def build_item_store(
    settings: Settings,
    db_manager: DatabaseSessionManager | None = None,
    clock: Clock = utc_now,
) -> ItemStore:
    """Build the configured store. The SQL backend requires a session manager."""
    if settings.store_backend == StoreBackend.MEMORY:
        logger.info("Using in-memory item store", extra={"backend": "memory"})
        return InMemoryItemStore(clock=clock)
    if db_manager is None:
        raise ValueError("SQL item store requires a DatabaseSessionManager")
    logger.info("Using SQL item store", extra={"backend": "sql"})
    return SqlItemStore(db_manager, clock=clock)
