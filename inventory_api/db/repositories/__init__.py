# Repository pattern: services see the store protocols, these are the SQL implementations

from inventory_api.db.repositories.item_repository import ItemRepository
from inventory_api.db.repositories.protocols import ItemStore, UserStore
from inventory_api.db.repositories.user_repository import UserRepository

__all__ = ["UserRepository", "ItemRepository", "ItemStore", "UserStore"]
