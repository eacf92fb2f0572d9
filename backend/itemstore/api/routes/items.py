"""Item Routes — HTTP shell over an ItemStore.

Invariants:
    - POST creates exactly one Item; the body is ignored (the store mints id + timestamp)
    - GET /items lists in store order; no reordering here
    - Unknown ids propagate as NotFoundError → 404 via the global handler
    - PersistenceError propagates → 503 via the global handler

Design Decisions:
    - No update endpoint: Items are immutable once created
    - DELETE returns 204: deletion is applied synchronously by the store
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from itemstore.api.dependencies import get_item_store
from itemstore.core.domain_types import ItemId
from itemstore.core.repository_protocols import ItemStore
from itemstore.schemas.item import ItemListResponse, ItemResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/items", tags=["items"])


@router.post(
    "", response_model=ItemResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_item(store: ItemStore = Depends(get_item_store)):
    """Create a new Item stamped with the current UTC time."""
    item = await store.create()
    return ItemResponse.model_validate(item)


@router.get("", response_model=ItemListResponse)
async def list_items(store: ItemStore = Depends(get_item_store)):
    """List all Items in insertion order."""
    items = await store.list()
    return ItemListResponse.from_items(list(items))


@router.get("/{item_id}", response_model=ItemResponse)
async def get_item(item_id: UUID, store: ItemStore = Depends(get_item_store)):
    item = await store.get(ItemId(item_id))
    return ItemResponse.model_validate(item)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(item_id: UUID, store: ItemStore = Depends(get_item_store)):
    await store.delete(ItemId(item_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
