"""SQL Item Store — persists Items in the `items` table through SQLAlchemy.

Invariants:
    - One transaction per operation: an Item is fully inserted or not at all
    - list() orders by seq ascending (insertion order), never by timestamp
    - delete() of an unknown id raises NotFoundError and commits nothing
    - Driver failures surface as PersistenceError (mapped by DatabaseSessionManager)

Design Decisions:
    - Timestamp minted inside the lock: seq order and timestamp order agree
    - Returns frozen Item snapshots, never ORM rows bound to a session
    - No retries: retry policy belongs to the caller
"""

import asyncio
import logging
from collections.abc import Sequence

from sqlalchemy import select, func, delete

from itemstore.core.domain_types import ItemId, StoreOperation
from itemstore.core.errors import ErrorContext, NotFoundError
from itemstore.core.item import Clock, Item, item_from_storage, new_item, utc_now
from itemstore.infrastructure.database import DatabaseSessionManager
from itemstore.models.item import ItemRow

logger = logging.getLogger(__name__)


class SqlItemStore:
    """ItemStore backed by a relational database."""

    def __init__(self, db: DatabaseSessionManager, clock: Clock = utc_now):
        self._db = db
        self._clock = clock
        self._lock = asyncio.Lock()

    async def create(self) -> Item:
        op = StoreOperation.CREATE.value
        async with self._lock:
            item = new_item(self._clock)
            async with self._db.session(op) as db:
                db.add(ItemRow(id=item.id, timestamp=item.timestamp))
                await db.commit()
        logger.info("Item created", extra={"item_id": str(item.id), "operation": op})
        return item

    async def list(self) -> Sequence[Item]:
        async with self._db.session(StoreOperation.LIST.value) as db:
            result = await db.execute(
                select(ItemRow.id, ItemRow.timestamp).order_by(ItemRow.seq.asc()),
            )
            rows = result.all()
        return [item_from_storage(row.id, row.timestamp) for row in rows]

    async def get(self, item_id: ItemId) -> Item:
        op = StoreOperation.GET.value
        async with self._db.session(op) as db:
            result = await db.execute(
                select(ItemRow.id, ItemRow.timestamp).where(ItemRow.id == item_id),
            )
            row = result.one_or_none()
        if row is None:
            raise NotFoundError(str(item_id), ErrorContext(operation=op))
        return item_from_storage(row.id, row.timestamp)

    async def count(self) -> int:
        async with self._db.session(StoreOperation.COUNT.value) as db:
            result = await db.execute(select(func.count()).select_from(ItemRow))
            return result.scalar_one()

    async def delete(self, item_id: ItemId) -> None:
        op = StoreOperation.DELETE.value
        async with self._lock:
            async with self._db.session(op) as db:
                result = await db.execute(
                    delete(ItemRow).where(ItemRow.id == item_id),
                )
                if result.rowcount == 0:
                    await db.rollback()
                    raise NotFoundError(str(item_id), ErrorContext(operation=op))
                await db.commit()
        logger.info("Item deleted", extra={"item_id": str(item_id), "operation": op})
