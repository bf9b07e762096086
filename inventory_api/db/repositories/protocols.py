"""
Store contracts the services depend on. The SQLAlchemy repositories satisfy them,
and so can any in-memory double used in tests.
"""

from typing import Any, Protocol

from inventory_api.db.models.item import Item
from inventory_api.db.models.user import User


class ItemStore(Protocol):
    async def get_all(self) -> list[Item]: ...

    async def get_by_id(self, id: int) -> Item | None: ...

    async def insert(self, values: dict[str, Any]) -> int: ...

    async def update(self, id: int, values: dict[str, Any]) -> int: ...

    async def delete(self, id: int) -> int: ...

    async def adjust_amount(self, id: int, delta: int) -> None: ...


class UserStore(Protocol):
    async def get_by_username(self, username: str) -> User | None: ...

    async def get_all(self) -> list[User]: ...

    async def get_by_id(self, id: int) -> User | None: ...

    async def insert(self, values: dict[str, Any]) -> int: ...

    async def update(self, id: int, values: dict[str, Any]) -> int: ...

    async def delete(self, id: int) -> int: ...
