"""
Item repository - item data access.
"""

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_api.db.models.item import Item
from inventory_api.db.repositories.base_repository import BaseRepository


class ItemRepository(BaseRepository[Item]):
    """Item-specific queries on top of the generic CRUD."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Item)

    async def adjust_amount(self, id: int, delta: int) -> None:
        """Relative update: the database adds ``delta`` to whatever amount it holds now."""
        await self.session.execute(
            update(Item).where(Item.id == id).values(amount=Item.amount + delta)
        )
