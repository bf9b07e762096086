"""User request/response schemas - API contract and validation."""

from pydantic import BaseModel, ConfigDict, Field


class UserPayload(BaseModel):
    """Body for create, replace and login."""

    model_config = ConfigDict(extra="forbid")

    username: str = Field(..., min_length=1, max_length=50)
    # bcrypt only reads the first 72 bytes; longer input is accepted and truncated.
    password: str = Field(..., min_length=1, max_length=100)


class UserResponse(BaseModel):
    """Public view of a user. The password hash never leaves the service."""

    id: int
    username: str

    model_config = ConfigDict(from_attributes=True)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
