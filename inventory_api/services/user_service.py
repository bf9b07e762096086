"""
User service - admin accounts, password hashing and login.
Design: Store, hasher and token issuer are constructor arguments; no global secrets.
"""

import logging

from inventory_api.core.security import PasswordHasher, TokenIssuer
from inventory_api.db.models.user import User
from inventory_api.db.repositories.protocols import UserStore
from inventory_api.services.errors import (
    AlreadyExistsError,
    InvalidCredentialsError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"
USER_EXISTS = "User already exists"


class UserService:
    """Handles user CRUD and the login flow."""

    def __init__(self, user_repo: UserStore, hasher: PasswordHasher, token_issuer: TokenIssuer):
        self.user_repo = user_repo
        self.hasher = hasher
        self.token_issuer = token_issuer

    async def list_users(self) -> list[User]:
        return await self.user_repo.get_all()

    async def get_user(self, id: int) -> User:
        user = await self.user_repo.get_by_id(id)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)
        return user

    async def create_user(self, username: str, password: str) -> int:
        """Insert a new admin. Only the hash of ``password`` reaches the store."""
        if await self.user_repo.get_by_username(username) is not None:
            raise AlreadyExistsError(USER_EXISTS)
        user_id = await self.user_repo.insert(
            {"username": username, "hashed_password": self.hasher.hash(password)}
        )
        logger.info("Created user id=%s username=%r", user_id, username)
        return user_id

    async def replace_user(self, id: int, username: str, password: str) -> None:
        """Overwrite username and password. The password is rehashed even if unchanged."""
        owner = await self.user_repo.get_by_username(username)
        if owner is not None and owner.id != id:
            if await self.user_repo.get_by_id(id) is None:
                raise NotFoundError(USER_NOT_FOUND)
            raise AlreadyExistsError(USER_EXISTS)
        changed = await self.user_repo.update(
            id, {"username": username, "hashed_password": self.hasher.hash(password)}
        )
        if changed == 0:
            raise NotFoundError(USER_NOT_FOUND)

    async def remove_user(self, id: int) -> None:
        if await self.user_repo.delete(id) == 0:
            raise NotFoundError(USER_NOT_FOUND)
        logger.info("Deleted user id=%s", id)

    async def login(self, username: str, password: str) -> str:
        """
        Verify credentials and return a signed token valid for the configured lifetime.

        Unknown usernames and wrong passwords raise the same error, and an unknown
        username still pays for one hash verification.
        """
        user = await self.user_repo.get_by_username(username)
        if user is None:
            self.hasher.dummy_verify()
            logger.warning("Rejected login for username=%r", username)
            raise InvalidCredentialsError()
        if not self.hasher.verify(password, user.hashed_password):
            logger.warning("Rejected login for username=%r", username)
            raise InvalidCredentialsError()
        return self.token_issuer.issue()
