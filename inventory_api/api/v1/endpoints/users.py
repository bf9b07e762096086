"""
User endpoints - admin login and user management (token required except login).
"""

from typing import Annotated

from fastapi import APIRouter, Path, Response, status

from inventory_api.core.dependencies import Authenticated, UserServiceDep
from inventory_api.schemas.item import CreatedResponse
from inventory_api.schemas.user import TokenResponse, UserPayload, UserResponse

router = APIRouter()

UserId = Annotated[int, Path(ge=1)]


@router.post("/login", response_model=TokenResponse)
async def login(svc: UserServiceDep, data: UserPayload):
    """Authenticate and return JWT."""
    token = await svc.login(data.username, data.password)
    return TokenResponse(access_token=token)


@router.get("", response_model=list[UserResponse], dependencies=[Authenticated])
async def list_users(svc: UserServiceDep):
    return await svc.list_users()


@router.get("/{user_id}", response_model=UserResponse, dependencies=[Authenticated])
async def get_user(svc: UserServiceDep, user_id: UserId):
    return await svc.get_user(user_id)


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Authenticated],
)
async def create_user(svc: UserServiceDep, data: UserPayload, response: Response):
    """Create user. Returns the id only; the password is never echoed."""
    user_id = await svc.create_user(data.username, data.password)
    response.headers["Location"] = f"/api/v1/users/{user_id}"
    return CreatedResponse(id=user_id)


@router.put("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Authenticated])
async def replace_user(svc: UserServiceDep, data: UserPayload, user_id: UserId):
    await svc.replace_user(user_id, data.username, data.password)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Authenticated])
async def delete_user(svc: UserServiceDep, user_id: UserId):
    await svc.remove_user(user_id)
