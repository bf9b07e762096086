"""
Item API tests - REST CRUD, stock adjustment and validation.
Challenge: Ensure endpoints return correct status codes and shape.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from inventory_api.core.dependencies import get_item_service
from inventory_api.main import app
from inventory_api.services import ItemService

ITEM = {
    "name": "Drake",
    "description": "En förödande varelse!",
    "price": 14.90,
    "imageUrl": "No url",
    "amount": 100,
}


@pytest.mark.asyncio
async def test_list_items_empty(client: AsyncClient):
    """GET /api/v1/items returns 200 and an empty list on a fresh database."""
    response = await client.get("/api/v1/items")
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_create_item(client: AsyncClient):
    """POST /api/v1/items returns 201, the new id and a Location header."""
    response = await client.post("/api/v1/items", json=ITEM)
    assert response.status_code == 201
    assert response.json() == {"id": 1}
    assert response.headers["location"] == "/api/v1/items/1"


@pytest.mark.asyncio
async def test_get_item(client: AsyncClient):
    await client.post("/api/v1/items", json=ITEM)
    response = await client.get("/api/v1/items/1")
    assert response.status_code == 200
    assert response.json() == {"id": 1, **ITEM}


@pytest.mark.asyncio
async def test_list_items_in_id_order(client: AsyncClient):
    for name in ("Troll", "Drake"):
        await client.post("/api/v1/items", json={**ITEM, "name": name})
    response = await client.get("/api/v1/items")
    assert [(i["id"], i["name"]) for i in response.json()] == [(1, "Troll"), (2, "Drake")]


@pytest.mark.asyncio
async def test_replace_item(client: AsyncClient):
    await client.post("/api/v1/items", json=ITEM)
    response = await client.put("/api/v1/items/1", json={**ITEM, "price": 0, "amount": 7})
    assert response.status_code == 204
    data = (await client.get("/api/v1/items/1")).json()
    assert (data["price"], data["amount"]) == (0, 7)


@pytest.mark.asyncio
async def test_delete_item(client: AsyncClient):
    await client.post("/api/v1/items", json=ITEM)
    assert (await client.delete("/api/v1/items/1")).status_code == 204
    assert (await client.get("/api/v1/items")).json() == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method,body",
    [("get", None), ("put", ITEM), ("delete", None), ("patch", {"amount": 1})],
)
async def test_missing_item_is_400(client: AsyncClient, method: str, body):
    """Unknown ids are a domain error, reported as 400 with the message."""
    kwargs = {"json": body} if body is not None else {}
    response = await client.request(method.upper(), "/api/v1/items/42", **kwargs)
    assert response.status_code == 400
    assert response.json() == {"message": "Item not found"}


@pytest.mark.asyncio
async def test_adjust_amount(client: AsyncClient):
    await client.post("/api/v1/items", json=ITEM)
    assert (await client.patch("/api/v1/items/1", json={"amount": 5})).status_code == 204
    assert (await client.patch("/api/v1/items/1", json={"amount": -3})).status_code == 204
    assert (await client.get("/api/v1/items/1")).json()["amount"] == 102


@pytest.mark.asyncio
async def test_adjust_amount_below_zero_is_rejected(client: AsyncClient):
    await client.post("/api/v1/items", json=ITEM)
    response = await client.patch("/api/v1/items/1", json={"amount": -150})
    assert response.status_code == 400
    assert response.json() == {"message": "Insufficient stock amount. Current: 100, requested: -150"}
    assert (await client.get("/api/v1/items/1")).json()["amount"] == 100


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {**ITEM, "name": ""},
        {**ITEM, "name": "x" * 101},
        {**ITEM, "description": "x" * 201},
        {**ITEM, "price": -1},
        {**ITEM, "price": "inf"},
        {**ITEM, "price": "nan"},
        {**ITEM, "imageUrl": "x" * 2001},
        {**ITEM, "amount": -1},
        {**ITEM, "owner_id": 1},
        {k: v for k, v in ITEM.items() if k != "price"},
    ],
)
async def test_create_item_validation(client: AsyncClient, body: dict):
    response = await client.post("/api/v1/items", json=body)
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request"
    assert (await client.get("/api/v1/items")).json() == []


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/v1/items/0", "/api/v1/items/abc"])
async def test_invalid_item_id(client: AsyncClient, path: str):
    assert (await client.get(path)).status_code == 400


@pytest.mark.asyncio
async def test_adjust_amount_requires_integer(client: AsyncClient):
    await client.post("/api/v1/items", json=ITEM)
    response = await client.patch("/api/v1/items/1", json={"amount": 1.5})
    assert response.status_code == 400
    assert (await client.get("/api/v1/items/1")).json()["amount"] == 100


class BrokenItemStore:
    async def get_all(self):
        raise RuntimeError("database is locked")


@pytest.mark.asyncio
async def test_store_failure_is_opaque_500():
    """Infrastructure errors are logged, never echoed to the caller."""
    app.dependency_overrides[get_item_service] = lambda: ItemService(BrokenItemStore())
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=False),
            base_url="http://test",
        ) as ac:
            response = await ac.get("/api/v1/items")
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 500
    assert response.json() == {"ok": False}
