"""
Token check - lets a client ask whether its bearer token is still accepted.
"""

from fastapi import APIRouter

from inventory_api.core.dependencies import Authenticated

router = APIRouter()


@router.get("", dependencies=[Authenticated])
async def check_token():
    return {"status": "ok"}
