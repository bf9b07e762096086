"""
API v1 router - aggregates all endpoint modules.
"""

from fastapi import APIRouter

from inventory_api.api.v1.endpoints import auth, health, items, users

api_router = APIRouter(prefix="/v1")

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(items.router, prefix="/items", tags=["items"])
