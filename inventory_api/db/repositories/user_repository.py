"""
User repository - encapsulates all user data access.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_api.db.models.user import User
from inventory_api.db.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """User-specific queries. Extends base CRUD with lookup by username."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, User)

    async def get_by_username(self, username: str) -> User | None:
        """Find user by username - used for login and uniqueness checks."""
        result = await self.session.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()
