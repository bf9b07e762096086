"""
Item service - business logic for catalog items.
Design: Depends on the ItemStore protocol; endpoints stay thin and tests can swap the store.
"""

import logging

from inventory_api.db.models.item import Item
from inventory_api.db.repositories.protocols import ItemStore
from inventory_api.schemas.item import ItemPayload
from inventory_api.services.errors import InsufficientStockError, NotFoundError

logger = logging.getLogger(__name__)

ITEM_NOT_FOUND = "Item not found"


class ItemService:
    """Existence checks and the non-negative stock invariant."""

    def __init__(self, item_repo: ItemStore):
        self.item_repo = item_repo

    async def list_items(self) -> list[Item]:
        return await self.item_repo.get_all()

    async def get_item(self, id: int) -> Item:
        item = await self.item_repo.get_by_id(id)
        if item is None:
            raise NotFoundError(ITEM_NOT_FOUND)
        return item

    async def create_item(self, payload: ItemPayload) -> int:
        item_id = await self.item_repo.insert(payload.model_dump())
        logger.info("Created item id=%s name=%r", item_id, payload.name)
        return item_id

    async def replace_item(self, id: int, payload: ItemPayload) -> None:
        """Full-field update."""
        if await self.item_repo.update(id, payload.model_dump()) == 0:
            raise NotFoundError(ITEM_NOT_FOUND)

    async def remove_item(self, id: int) -> None:
        if await self.item_repo.delete(id) == 0:
            raise NotFoundError(ITEM_NOT_FOUND)
        logger.info("Deleted item id=%s", id)

    async def adjust_amount(self, id: int, delta: int) -> None:
        """
        Add ``delta`` (possibly negative) to the stock of item ``id``.

        The check runs against a snapshot and the write is a relative update in the
        store, so concurrent adjustments compose. A concurrent decrement landing
        between check and write can still push the stored amount below zero.
        """
        item = await self.get_item(id)
        if item.amount + delta < 0:
            logger.info(
                "Rejected stock adjustment for item id=%s: current=%s delta=%s",
                id,
                item.amount,
                delta,
            )
            raise InsufficientStockError(current=item.amount, delta=delta)
        await self.item_repo.adjust_amount(id, delta)
        logger.info("Adjusted stock for item id=%s by %s", id, delta)
