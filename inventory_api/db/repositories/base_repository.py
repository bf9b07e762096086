"""
Base repository - generic CRUD over one mapped table.
Writes report affected row counts; deciding what a zero means is the service's job.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_api.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Generic async repository. Subclasses define model-specific methods."""

    def __init__(self, session: AsyncSession, model: type[ModelType]):
        self.session = session
        self.model = model

    async def get_by_id(self, id: int) -> ModelType | None:
        """Fetch single entity by primary key, refreshed from the database."""
        result = await self.session.execute(
            select(self.model)
            .where(self.model.id == id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_all(self) -> list[ModelType]:
        """Every row, ascending id."""
        result = await self.session.execute(
            select(self.model)
            .order_by(self.model.id)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def insert(self, values: dict[str, Any]) -> int:
        """Persist new entity and return its id. Caller commits session."""
        entity = self.model(**values)
        self.session.add(entity)
        await self.session.flush()  # Get ID without committing
        return entity.id

    async def update(self, id: int, values: dict[str, Any]) -> int:
        """Overwrite the given columns. Returns rows affected."""
        result = await self.session.execute(
            update(self.model).where(self.model.id == id).values(**values)
        )
        return result.rowcount

    async def delete(self, id: int) -> int:
        """Remove by primary key. Returns rows affected."""
        result = await self.session.execute(delete(self.model).where(self.model.id == id))
        return result.rowcount
