"""Item — the persisted entity: an identity plus a creation timestamp.

Invariants:
    - id and timestamp are never None
    - timestamp is timezone-aware and in UTC
    - Item is frozen: no update operation exists, only deletion via the store

Design Decisions:
    - Frozen dataclass separate from the ORM row: callers get an immutable snapshot,
      never a reference into a live DB session
    - Items are built by stores only (new_item / item_from_storage), never by callers
"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from itemstore.core.domain_types import ItemId

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def normalize_utc(value: datetime) -> datetime:
    """Return value as an aware UTC datetime.

    Naive values are assumed to already be UTC (SQLite drops tzinfo on read).
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True, slots=True)
class Item:
    """Read-only view of a stored Item."""
    id: ItemId
    timestamp: datetime


def new_item(clock: Clock = utc_now) -> Item:
    """Mint a fresh Item with a random UUID4 id, stamped by clock."""
    return Item(id=ItemId(uuid.uuid4()), timestamp=normalize_utc(clock()))


def item_from_storage(item_id: uuid.UUID, timestamp: datetime) -> Item:
    """Rebuild an Item from values read back from the persistence medium."""
    return Item(id=ItemId(item_id), timestamp=normalize_utc(timestamp))
