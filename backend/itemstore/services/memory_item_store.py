"""In-Memory Item Store — holds Items in process memory.

Invariants:
    - dict insertion order == list() order
    - create/delete serialized by one asyncio.Lock
    - Never raises PersistenceError: process memory is always available

Design Decisions:
    - Same async signature as SqlItemStore so callers and tests are backend-agnostic
"""

import asyncio
import logging
from collections.abc import Sequence

from itemstore.core.domain_types import ItemId, StoreOperation
from itemstore.core.errors import ErrorContext, NotFoundError
from itemstore.core.item import Clock, Item, new_item, utc_now

logger = logging.getLogger(__name__)


class InMemoryItemStore:
    """ItemStore backed by an insertion-ordered dict."""

    def __init__(self, clock: Clock = utc_now):
        self._items: dict[ItemId, Item] = {}
        self._clock = clock
        self._lock = asyncio.Lock()

    async def create(self) -> Item:
        async with self._lock:
            item = new_item(self._clock)
            while item.id in self._items:
                item = new_item(self._clock)
            self._items[item.id] = item
        logger.info(
            "Item created",
            extra={"item_id": str(item.id), "operation": StoreOperation.CREATE.value},
        )
        return item

    async def list(self) -> Sequence[Item]:
        return [*self._items.values()]

    async def get(self, item_id: ItemId) -> Item:
        item = self._items.get(item_id)
        if item is None:
            raise NotFoundError(
                str(item_id), ErrorContext(operation=StoreOperation.GET.value),
            )
        return item

    async def count(self) -> int:
        return len(self._items)

    async def delete(self, item_id: ItemId) -> None:
        async with self._lock:
            if item_id not in self._items:
                raise NotFoundError(
                    str(item_id), ErrorContext(operation=StoreOperation.DELETE.value),
                )
            del self._items[item_id]
        logger.info(
            "Item deleted",
            extra={"item_id": str(item_id), "operation": StoreOperation.DELETE.value},
        )
