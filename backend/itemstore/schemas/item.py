"""Item Schemas — public-facing Item representations.

Invariants:
    - timestamp always serialized as an ISO-8601 UTC instant
    - ItemListResponse.items preserves store order (insertion order)

Design Decisions:
    - from_attributes: responses built straight from frozen core Items
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from itemstore.core.item import Item


class ItemResponse(BaseModel):
    """A single Item."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    timestamp: datetime


class ItemListResponse(BaseModel):
    """All Items currently held, in insertion order."""
    items: list[ItemResponse]
    count: int

    @classmethod
    def from_items(cls, items: list[Item]) -> "ItemListResponse":
        return cls(
            items=[ItemResponse.model_validate(i) for i in items],
            count=len(items),
        )
