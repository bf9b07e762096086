"""
Pytest fixtures - in-memory database, services, HTTP client, auth.
Each test gets a fresh database, so the first inserted row always has id 1.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from inventory_api.core.dependencies import get_password_hasher, get_token_issuer
from inventory_api.core.security import PasswordHasher, TokenIssuer
from inventory_api.db.base import Base
from inventory_api.db.models import Item, User  # noqa: F401 - ensure models are registered
from inventory_api.db.repositories import ItemRepository, UserRepository
from inventory_api.db.session import get_db
from inventory_api.main import app
from inventory_api.services import ItemService, UserService

# In-memory SQLite; StaticPool keeps the single connection (and its data) alive
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with async_session() as s:
        yield s


@pytest.fixture
def hasher() -> PasswordHasher:
    # Minimum bcrypt cost keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_issuer() -> TokenIssuer:
    return TokenIssuer(secret_key="test-secret", expire_minutes=60)


@pytest.fixture
def item_service(session: AsyncSession) -> ItemService:
    return ItemService(ItemRepository(session))


@pytest.fixture
def user_service(session: AsyncSession, hasher: PasswordHasher, token_issuer: TokenIssuer) -> UserService:
    return UserService(UserRepository(session), hasher, token_issuer)


@pytest_asyncio.fixture
async def client(session: AsyncSession, hasher: PasswordHasher, token_issuer: TokenIssuer):
    async def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_password_hasher] = lambda: hasher
    app.dependency_overrides[get_token_issuer] = lambda: token_issuer
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def item_payload() -> dict:
    return {
        "name": "Drake",
        "description": "x",
        "price": 14.90,
        "image_url": "u",
        "amount": 100,
    }


@pytest_asyncio.fixture
async def admin_user(user_service: UserService) -> int:
    return await user_service.create_user("mmbullar", "secret")


@pytest.fixture
def auth_headers(token_issuer: TokenIssuer) -> dict:
    return {"Authorization": f"Bearer {token_issuer.issue()}"}
