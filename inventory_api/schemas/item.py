"""Item request/response schemas - REST API contract."""

from pydantic import BaseModel, ConfigDict, Field


class ItemPayload(BaseModel):
    """Body for create and full replace. Every field is required."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=200)
    price: float = Field(..., ge=0, allow_inf_nan=False)
    # Wire name is camelCase; image_url is accepted too
    image_url: str = Field(..., alias="imageUrl", min_length=1, max_length=2000)
    amount: int = Field(..., ge=0)


class AmountAdjustment(BaseModel):
    """Body for PATCH: a signed delta applied to the current stock."""

    model_config = ConfigDict(extra="forbid")

    amount: int


class ItemResponse(BaseModel):
    id: int
    name: str
    description: str
    price: float
    image_url: str = Field(serialization_alias="imageUrl")
    amount: int

    model_config = ConfigDict(from_attributes=True)


class CreatedResponse(BaseModel):
    id: int
