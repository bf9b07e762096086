from inventory_api.db.models.item import Item
from inventory_api.db.models.user import User

__all__ = ["Item", "User"]
