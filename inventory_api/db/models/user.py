"""
User model - administrative account. Only the password hash is persisted.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from inventory_api.db.base import Base


class User(Base):
    """Admin user. Uniqueness of ``username`` is checked by the service before writes."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(50), unique=True, index=True, nullable=False)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username})>"
