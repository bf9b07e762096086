"""
SQLAlchemy declarative base shared by the item and user tables.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all ORM models. Alembic reads its metadata."""

    pass
