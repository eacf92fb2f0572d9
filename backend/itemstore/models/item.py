"""Item ORM — persists Items in the `items` table.

Invariants:
    - id is a UUID, unique and non-nullable (the public key)
    - timestamp is non-nullable, timezone-aware, written once
    - seq is the autoincrementing primary key: ascending seq == insertion order

Design Decisions:
    - seq separate from id: UUIDs carry no order and timestamps can tie
    - sqlite_autoincrement: SQLite never reuses a seq, even after deleting the newest row
    - No update path: rows are inserted and deleted, never modified
"""

import uuid
from datetime import datetime

from sqlalchemy import Integer, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from itemstore.db.base import Base


class ItemRow(Base):
    """Storage row for one Item."""
    __tablename__ = "items"
    __table_args__ = {"sqlite_autoincrement": True}

    seq: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), unique=True, nullable=False, index=True,
    )
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
