"""
Item CRUD endpoints - RESTful resource (GET/POST/PUT/DELETE/PATCH).
Design: Thin controller; ItemService holds the rules, domain errors are mapped in main.
"""

from typing import Annotated

from fastapi import APIRouter, Path, Response, status

from inventory_api.core.dependencies import ItemServiceDep
from inventory_api.schemas.item import AmountAdjustment, CreatedResponse, ItemPayload, ItemResponse

router = APIRouter()

ItemId = Annotated[int, Path(ge=1)]


@router.get("", response_model=list[ItemResponse])
async def list_items(svc: ItemServiceDep):
    """All items, ascending id."""
    return await svc.list_items()


@router.get("/{item_id}", response_model=ItemResponse)
async def get_item(svc: ItemServiceDep, item_id: ItemId):
    return await svc.get_item(item_id)


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_item(svc: ItemServiceDep, data: ItemPayload, response: Response):
    """Create item. Location header points at the new resource."""
    item_id = await svc.create_item(data)
    response.headers["Location"] = f"/api/v1/items/{item_id}"
    return CreatedResponse(id=item_id)


@router.put("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def replace_item(svc: ItemServiceDep, data: ItemPayload, item_id: ItemId):
    await svc.replace_item(item_id, data)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(svc: ItemServiceDep, item_id: ItemId):
    await svc.remove_item(item_id)


@router.patch("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def adjust_item_amount(svc: ItemServiceDep, data: AmountAdjustment, item_id: ItemId):
    """Apply a signed stock delta. 400 if the result would be negative."""
    await svc.adjust_amount(item_id, data.amount)
