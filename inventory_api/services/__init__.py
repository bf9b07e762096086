"""Service layer - business rules between the HTTP endpoints and the repositories."""

from inventory_api.services.errors import (
    AlreadyExistsError,
    DomainError,
    InsufficientStockError,
    InvalidCredentialsError,
    NotFoundError,
)
from inventory_api.services.item_service import ItemService
from inventory_api.services.user_service import UserService

__all__ = [
    "DomainError",
    "NotFoundError",
    "AlreadyExistsError",
    "InsufficientStockError",
    "InvalidCredentialsError",
    "ItemService",
    "UserService",
]
