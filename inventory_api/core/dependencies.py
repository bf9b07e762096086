"""
FastAPI dependencies - per-request service construction and the token guard.
Design: Services get their collaborators through constructors; nothing is looked up
from a container at runtime.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from inventory_api.config import get_settings
from inventory_api.core.security import (
    PasswordHasher,
    TokenIssuer,
    build_password_hasher,
    build_token_issuer,
)
from inventory_api.db.repositories.item_repository import ItemRepository
from inventory_api.db.repositories.user_repository import UserRepository
from inventory_api.db.session import DbSession
from inventory_api.services.item_service import ItemService
from inventory_api.services.user_service import UserService

security = HTTPBearer(auto_error=False)


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return build_password_hasher(get_settings())


@lru_cache
def get_token_issuer() -> TokenIssuer:
    return build_token_issuer(get_settings())


def get_item_service(session: DbSession) -> ItemService:
    """Factory for service with repository injection."""
    return ItemService(ItemRepository(session))


def get_user_service(
    session: DbSession,
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    token_issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> UserService:
    return UserService(UserRepository(session), hasher, token_issuer)


async def require_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    token_issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> None:
    """Reject the request with 401 unless it carries a valid, unexpired bearer token."""
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if token_issuer.decode(credentials.credentials) is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )


ItemServiceDep = Annotated[ItemService, Depends(get_item_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
Authenticated = Depends(require_token)
