"""HTTP tests for /api/products."""

import pytest
from httpx import AsyncClient

from freezer_backend.config.settings import settings
from freezer_backend.models import Product


class TestProductLookups:

    @pytest.mark.asyncio
    async def test_list_all(self, client: AsyncClient):
        response = await client.get("/api/products")
        assert response.status_code == 200
        assert response.json() == [
            {"productId": 1, "name": "Brocoli", "expirationMonths": 16},
            {"productId": 2, "name": "Asperges", "expirationMonths": 12},
            {"productId": 3, "name": "Kip", "expirationMonths": 6},
            {"productId": 4, "name": "Zalm", "expirationMonths": 1},
        ]

    @pytest.mark.asyncio
    async def test_by_id(self, client: AsyncClient):
        response = await client.get("/api/products/id=3")
        assert response.json() == {"productId": 3, "name": "Kip", "expirationMonths": 6}

    @pytest.mark.asyncio
    async def test_by_name(self, client: AsyncClient):
        response = await client.get("/api/products/name=Zalm")
        assert response.json()["productId"] == 4

    @pytest.mark.asyncio
    async def test_by_expiration(self, client: AsyncClient):
        response = await client.get("/api/products/expiration=6")
        assert [p["name"] for p in response.json()] == ["Kip"]
        none = await client.get("/api/products/expiration=2")
        assert none.json() == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/api/products/id=99", "/api/products/name=Erwten"])
    async def test_not_found(self, client: AsyncClient, path):
        response = await client.get(path)
        assert response.status_code == 500
        assert response.text == "Record not found"


class TestProductChanges:

    @pytest.mark.asyncio
    async def test_create_with_default_shelf_life(self, client: AsyncClient):
        response = await client.post("/api/products", json={"name": "Erwten"})
        assert response.status_code == 200, response.text
        assert response.json() == {
            "productId": 5,
            "name": "Erwten",
            "expirationMonths": settings.default_expiration_months,
        }

    @pytest.mark.asyncio
    async def test_create_with_shelf_life(self, client: AsyncClient):
        response = await client.post("/api/products", json={"name": "Soep", "expirationMonths": 3})
        assert response.json()["expirationMonths"] == 3

    @pytest.mark.asyncio
    async def test_create_duplicate(self, client: AsyncClient):
        response = await client.post("/api/products", json={"name": "Kip"})
        assert response.status_code == 500
        assert response.text == "This product name already exists"

    @pytest.mark.asyncio
    async def test_update_keeps_own_name(self, client: AsyncClient):
        response = await client.patch("/api/products", json={"productId": 4, "name": "Zalm", "expirationMonths": 3})
        assert response.status_code == 200
        assert response.json()["expirationMonths"] == 3

    @pytest.mark.asyncio
    async def test_update_changes_expiration_of_stored_items(self, client: AsyncClient):
        await client.patch("/api/products", json={"productId": 3, "name": "Kip", "expirationMonths": 12})
        response = await client.get("/api/storage/3")
        assert response.json()[0]["expirationDate"] == "2023-11-30"

    @pytest.mark.asyncio
    async def test_update_to_taken_name(self, client: AsyncClient):
        response = await client.patch("/api/products", json={"productId": 4, "name": "Kip", "expirationMonths": 1})
        assert response.status_code == 500
        assert response.text == "This product name already exists"

    @pytest.mark.asyncio
    async def test_update_unknown_id(self, client: AsyncClient):
        response = await client.patch("/api/products", json={"productId": 99, "name": "Erwten", "expirationMonths": 1})
        assert response.status_code == 500
        assert response.text == "Record not found"

    @pytest.mark.asyncio
    async def test_delete_removes_stored_items(self, client: AsyncClient):
        response = await client.delete("/api/products/id=3")
        assert response.status_code == 200
        assert response.json() == 3

        storage = await client.get("/api/storage")
        assert [item["storageId"] for item in storage.json()] == [1, 2]

    @pytest.mark.asyncio
    async def test_delete_unknown_id(self, client: AsyncClient):
        response = await client.delete("/api/products/id=99")
        assert response.status_code == 500
        assert response.text == "This product id does not exist"


class TestShelfLifeBounds:
    """Shelf lives must keep every expiration date inside the calendar."""

    @pytest.mark.asyncio
    async def test_update_with_runaway_shelf_life_is_rejected(self, client: AsyncClient):
        response = await client.patch(
            "/api/products", json={"productId": 1, "name": "Brocoli", "expirationMonths": 200000}
        )
        assert response.status_code == 422

        storage = await client.get("/api/storage")
        assert storage.status_code == 200
        assert [item["storageId"] for item in storage.json()] == [1, 2, 3, 5]

    @pytest.mark.asyncio
    async def test_create_bounds(self, client: AsyncClient):
        assert (await client.post("/api/products", json={"name": "Honing", "expirationMonths": 1200})).status_code == 200
        assert (await client.post("/api/products", json={"name": "Zout", "expirationMonths": 1201})).status_code == 422

    @pytest.mark.asyncio
    async def test_out_of_range_row_gives_plain_text_error(self, client: AsyncClient, db_session):
        product = await db_session.get(Product, 1)
        product.expiration_months = 200000
        await db_session.commit()

        response = await client.get("/api/storage")
        assert response.status_code == 500
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text.startswith("Cannot compute expiration date")
