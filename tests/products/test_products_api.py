"""Tests for the product endpoints."""
# ruff: noqa: S101, PLR2004

from uuid import uuid4

from fastapi import status
from httpx import AsyncClient

PRODUCTS = "/api/v1/products"


async def _create(client: AsyncClient, name: str, price: float, **extra) -> dict:
    resp = await client.post(PRODUCTS, json={"name": name, "price": price, **extra})
    assert resp.status_code == status.HTTP_201_CREATED, resp.text
    return resp.json()


async def test_create_product(client: AsyncClient) -> None:
    body = await _create(client, "Lamp", 19.5, description="Desk lamp", image="lamp.png")

    assert body["name"] == "Lamp"
    assert body["price"] == 19.5
    assert body["description"] == "Desk lamp"
    assert body["image"] == "lamp.png"
    assert body["status"] == "active"
    assert body["uuid"]
    assert "createdAt" in body
    assert "updatedAt" in body


async def test_create_product_missing_price(client: AsyncClient) -> None:
    resp = await client.post(PRODUCTS, json={"name": "Lamp"})

    assert resp.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    error = resp.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert any(fe["field"].endswith("price") for fe in error["field_errors"])


async def test_get_product_by_id(client: AsyncClient) -> None:
    created = await _create(client, "Chair", 45.0)

    resp = await client.get(f"{PRODUCTS}/{created['uuid']}")

    assert resp.status_code == status.HTTP_200_OK
    assert resp.json()["name"] == "Chair"


async def test_get_missing_product(client: AsyncClient) -> None:
    resp = await client.get(f"{PRODUCTS}/{uuid4()}")

    assert resp.status_code == status.HTTP_404_NOT_FOUND
    error = resp.json()["error"]
    assert error["code"] == "NOT_FOUND"
    assert error["message"] == "Product not found"


async def test_invalid_product_id(client: AsyncClient) -> None:
    resp = await client.get(f"{PRODUCTS}/not-a-uuid")

    assert resp.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


async def test_update_product(client: AsyncClient) -> None:
    created = await _create(client, "Table", 100.0, description="Oak")

    resp = await client.put(
        f"{PRODUCTS}/{created['uuid']}",
        json={"price": 80.0, "status": "inactive"},
    )

    assert resp.status_code == status.HTTP_200_OK
    body = resp.json()
    assert body["price"] == 80.0
    assert body["status"] == "inactive"
    assert body["name"] == "Table"
    assert body["description"] == "Oak"


async def test_update_product_rejects_unknown_status(client: AsyncClient) -> None:
    created = await _create(client, "Table", 100.0)

    resp = await client.put(f"{PRODUCTS}/{created['uuid']}", json={"status": "archived"})

    assert resp.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


async def test_update_missing_product(client: AsyncClient) -> None:
    resp = await client.put(f"{PRODUCTS}/{uuid4()}", json={"name": "Ghost"})

    assert resp.status_code == status.HTTP_404_NOT_FOUND
    assert resp.json()["error"]["message"] == "Product not found"


async def test_delete_product(client: AsyncClient) -> None:
    created = await _create(client, "Shelf", 60.0)

    resp = await client.delete(f"{PRODUCTS}/{created['uuid']}")
    assert resp.status_code == status.HTTP_204_NO_CONTENT

    resp = await client.get(f"{PRODUCTS}/{created['uuid']}")
    assert resp.status_code == status.HTTP_404_NOT_FOUND


async def test_delete_missing_product(client: AsyncClient) -> None:
    resp = await client.delete(f"{PRODUCTS}/{uuid4()}")

    assert resp.status_code == status.HTTP_404_NOT_FOUND


class TestListProducts:
    """Listing goes through the shared list query engine."""

    async def test_default_page(self, client: AsyncClient) -> None:
        for i in range(1, 13):
            await _create(client, f"Widget-{i}", float(i))

        resp = await client.get(PRODUCTS)

        assert resp.status_code == status.HTTP_200_OK
        payload = resp.json()
        assert len(payload["result"]) == 10
        assert payload["meta"] == {"page": 1, "limit": 10, "total": 12}

    async def test_search_sort_and_no_limit(self, client: AsyncClient) -> None:
        for i in range(1, 13):
            await _create(client, f"Widget-{i}", float(i))
        await _create(client, "Gizmo", 999.0)

        resp = await client.get(
            PRODUCTS,
            params={"search": "Widget-1", "sort": "price", "order": "ASC", "limit": -1},
        )

        payload = resp.json()
        assert [p["name"] for p in payload["result"]] == ["Widget-1", "Widget-10", "Widget-11", "Widget-12"]
        assert payload["meta"] == {"page": 1, "limit": -1, "total": 4}

    async def test_second_page(self, client: AsyncClient) -> None:
        for i in range(1, 8):
            await _create(client, f"Widget-{i}", float(i))

        resp = await client.get(PRODUCTS, params={"sort": "price", "order": "ASC", "page": 2, "limit": 3})

        payload = resp.json()
        assert [p["price"] for p in payload["result"]] == [4.0, 5.0, 6.0]
        assert payload["meta"] == {"page": 2, "limit": 3, "total": 7}

    async def test_empty(self, client: AsyncClient) -> None:
        resp = await client.get(PRODUCTS)

        assert resp.json() == {"result": [], "meta": {"page": 1, "limit": 10, "total": 0}}


async def test_update_product_clears_optional_fields(client: AsyncClient) -> None:
    created = await _create(client, "Table", 100.0, description="Oak", image="table.png")

    resp = await client.put(f"{PRODUCTS}/{created['uuid']}", json={"description": None})

    assert resp.status_code == status.HTTP_200_OK
    body = resp.json()
    assert body["description"] is None
    assert body["image"] == "table.png"


async def test_update_product_ignores_null_required_fields(client: AsyncClient) -> None:
    created = await _create(client, "Table", 100.0)

    resp = await client.put(f"{PRODUCTS}/{created['uuid']}", json={"name": None, "price": 90.0})

    assert resp.status_code == status.HTTP_200_OK
    body = resp.json()
    assert body["name"] == "Table"
    assert body["price"] == 90.0
