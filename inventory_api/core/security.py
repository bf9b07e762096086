"""
Security: password hashing and JWT issuance.
Design: Both primitives are plain objects built from explicit settings values, so the
user service receives them by injection instead of reading globals.
"""

from datetime import datetime, timezone, timedelta
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from inventory_api.config import Settings


class PasswordHasher:
    """One-way salted bcrypt hashing. Never store plain passwords."""

    def __init__(self, rounds: int = 10):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        """Fresh salt on every call, so equal passwords never share a hash."""
        return self._context.hash(password)

    def verify(self, plain: str, hashed: str) -> bool:
        """Constant-time comparison for login."""
        return self._context.verify(plain, hashed)

    def dummy_verify(self) -> None:
        """Burn one verification so unknown usernames cost as much as wrong passwords."""
        self._context.dummy_verify()


class TokenIssuer:
    """Signs stateless, time-bounded tokens with a single shared secret."""

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 60):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.lifetime = timedelta(minutes=expire_minutes)

    def issue(self, expires_in: timedelta | None = None) -> str:
        """Create a JWT carrying only an expiry claim."""
        expire = datetime.now(timezone.utc) + (expires_in or self.lifetime)
        return jwt.encode({"exp": expire}, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> dict[str, Any] | None:
        """Decode and validate JWT. Returns payload or None if invalid or expired."""
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError:
            return None


def build_password_hasher(settings: Settings) -> PasswordHasher:
    return PasswordHasher(rounds=settings.bcrypt_rounds)


def build_token_issuer(settings: Settings) -> TokenIssuer:
    return TokenIssuer(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        expire_minutes=settings.jwt_expire_minutes,
    )
