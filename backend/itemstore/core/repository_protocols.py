"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Every ItemStore is the sole authority for Item identity and lifecycle
    - list() returns a fresh snapshot in insertion order; no implicit reordering
    - delete() and get() raise NotFoundError for an unknown id, leaving the store unchanged
    - Any method touching the medium may raise PersistenceError; none retries

Design Decisions:
    - Protocol over ABC: structural subtyping, in-memory and SQL stores share no base class
    - Async in Protocol: the SQL store does IO, the in-memory store keeps the same
      signature so the two are interchangeable
"""

from collections.abc import Sequence
from typing import Protocol

from itemstore.core.domain_types import ItemId
from itemstore.core.item import Item


class ItemStore(Protocol):
    """Contract for Item persistence — implemented by shell."""
    async def create(self) -> Item: ...
    async def list(self) -> Sequence[Item]: ...
    async def get(self, item_id: ItemId) -> Item: ...
    async def count(self) -> int: ...
    async def delete(self, item_id: ItemId) -> None: ...
