#!/usr/bin/env python3
"""
Create the tables and seed one item and one admin user.
Seeding goes through the services, so the password is hashed exactly as at runtime.

  python scripts/init_db.py
  python scripts/init_db.py --reset --username admin --password s3cret
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from inventory_api.config import get_settings
from inventory_api.core.logging_config import setup_logging
from inventory_api.core.security import build_password_hasher, build_token_issuer
from inventory_api.db.base import Base
from inventory_api.db.models import Item, User  # noqa: F401 - ensure models are registered
from inventory_api.db.repositories import ItemRepository, UserRepository
from inventory_api.db.session import async_session_maker, engine
from inventory_api.schemas.item import ItemPayload
from inventory_api.services import AlreadyExistsError, ItemService, UserService

logger = logging.getLogger("init_db")

SEED_ITEM = ItemPayload(
    name="Drake",
    description="En förödande varelse!",
    price=14.90,
    image_url="No url",
    amount=100,
)


async def init_db(reset: bool, username: str, password: str) -> None:
    settings = get_settings()
    async with engine.begin() as conn:
        if reset:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_maker() as session:
        items = ItemService(ItemRepository(session))
        users = UserService(
            UserRepository(session),
            build_password_hasher(settings),
            build_token_issuer(settings),
        )
        if not await items.list_items():
            await items.create_item(SEED_ITEM)
        try:
            await users.create_user(username, password)
        except AlreadyExistsError:
            logger.info("User %r already present, leaving it unchanged", username)
        await session.commit()
    await engine.dispose()
    logger.info("Database initialised at %s", settings.database_url)


def main():
    ap = argparse.ArgumentParser(description="Create tables and seed the inventory database")
    ap.add_argument("--reset", action="store_true", help="Drop existing tables first")
    ap.add_argument("--username", default="mmbullar", help="Admin username to seed")
    ap.add_argument("--password", default="jagharbakatbullar", help="Admin password to seed")
    args = ap.parse_args()

    setup_logging(get_settings().log_level)
    asyncio.run(init_db(args.reset, args.username, args.password))


if __name__ == "__main__":
    main()
