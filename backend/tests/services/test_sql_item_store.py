"""SQL Item Store — durability, ordering column, clock injection, failure mapping.

Invariants:
    - Items survive a new store and engine over the same database file
    - Stored timestamps come back aware and equal to the created value
    - A missing medium surfaces as PersistenceError, never a raw SQLAlchemy error
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from itemstore.core.errors import PersistenceError
from itemstore.infrastructure.database import DatabaseSessionManager
from itemstore.models.item import ItemRow
from itemstore.services.sql_item_store import SqlItemStore

FIXED = datetime(2025, 10, 6, 9, 30, 0, 250000, tzinfo=timezone.utc)


async def test_items_survive_reopen(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'items.db'}"

    first = DatabaseSessionManager(url)
    await first.create_schema()
    store = SqlItemStore(first)
    a = await store.create()
    b = await store.create()
    await first.dispose()

    second = DatabaseSessionManager(url)
    reopened = SqlItemStore(second)
    assert list(await reopened.list()) == [a, b]
    await second.dispose()


async def test_clock_is_injectable(db_manager):
    store = SqlItemStore(db_manager, clock=lambda: FIXED)
    item = await store.create()
    assert item.timestamp == FIXED
    assert (await store.get(item.id)).timestamp == FIXED


async def test_same_timestamp_still_insertion_ordered(db_manager):
    store = SqlItemStore(db_manager, clock=lambda: FIXED)
    created = [await store.create() for _ in range(5)]
    assert list(await store.list()) == created


async def test_rows_carry_increasing_seq(db_manager, sql_store):
    created = [await sql_store.create() for _ in range(5)]
    async with db_manager.session() as db:
        rows = (await db.execute(select(ItemRow.id, ItemRow.seq))).all()
    seq_by_id = {r.id: r.seq for r in rows}
    seqs = [seq_by_id[item.id] for item in created]
    assert all(earlier < later for earlier, later in zip(seqs, seqs[1:]))


async def test_seq_not_reused_after_deleting_newest(db_manager, sql_store):
    a = await sql_store.create()
    b = await sql_store.create()
    await sql_store.delete(b.id)
    c = await sql_store.create()
    async with db_manager.session() as db:
        rows = (await db.execute(select(ItemRow.id, ItemRow.seq))).all()
    seq_by_id = {r.id: r.seq for r in rows}
    assert seq_by_id[c.id] > seq_by_id[a.id] + 1


async def test_create_without_medium_raises_persistence_error(bare_db_manager):
    store = SqlItemStore(bare_db_manager)
    with pytest.raises(PersistenceError) as exc_info:
        await store.create()
    assert exc_info.value.operation == "create"


async def test_list_without_medium_raises_persistence_error(bare_db_manager):
    store = SqlItemStore(bare_db_manager)
    with pytest.raises(PersistenceError) as exc_info:
        await store.list()
    assert exc_info.value.operation == "list"


async def test_failed_create_leaves_nothing_behind(db_manager, sql_store, monkeypatch):
    await sql_store.create()

    async def _broken_commit(self):
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    monkeypatch.setattr("sqlalchemy.ext.asyncio.AsyncSession.commit", _broken_commit)
    with pytest.raises(PersistenceError):
        await sql_store.create()
    monkeypatch.undo()

    assert await sql_store.count() == 1


async def test_get_without_medium_raises_persistence_error(bare_db_manager):
    store = SqlItemStore(bare_db_manager)
    with pytest.raises(PersistenceError) as exc_info:
        await store.get(uuid4())
    assert exc_info.value.operation == "get"


async def test_delete_without_medium_raises_persistence_error(bare_db_manager):
    store = SqlItemStore(bare_db_manager)
    with pytest.raises(PersistenceError) as exc_info:
        await store.delete(uuid4())
    assert exc_info.value.operation == "delete"


async def test_failed_delete_keeps_item_listed(sql_store, monkeypatch):
    a = await sql_store.create()
    b = await sql_store.create()

    async def _broken_commit(self):
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    monkeypatch.setattr("sqlalchemy.ext.asyncio.AsyncSession.commit", _broken_commit)
    with pytest.raises(PersistenceError) as exc_info:
        await sql_store.delete(a.id)
    monkeypatch.undo()

    assert exc_info.value.operation == "delete"
    assert list(await sql_store.list()) == [a, b]
    assert await sql_store.count() == 2
