"""Unit tests for venue management in the admin console."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

VENUE = {
    "venue_name": "Grand Hall",
    "address": "1 Main St",
    "capacity": 200,
    "price": 1500.0,
    "contact_email": "events@grandhall.example",
}


class TestVenueCrud:
    async def test_create(self, client: AsyncClient):
        response = await client.post("/api/admin/venues", json=VENUE)

        assert response.status_code == 201
        data = response.json()
        assert data["venue_id"] > 0
        assert data["is_available"] is True
        assert data["capacity"] == 200

    async def test_create_rejects_non_positive_capacity(self, client: AsyncClient):
        response = await client.post("/api/admin/venues", json={**VENUE, "capacity": 0})
        assert response.status_code == 400

    async def test_list_includes_unavailable(self, client: AsyncClient):
        await client.post("/api/admin/venues", json=VENUE)
        await client.post("/api/admin/venues", json={**VENUE, "venue_name": "Annex", "is_available": False})

        response = await client.get("/api/admin/venues")

        assert [v["venue_name"] for v in response.json()] == ["Annex", "Grand Hall"]

    async def test_update(self, client: AsyncClient):
        created = (await client.post("/api/admin/venues", json=VENUE)).json()

        response = await client.put(
            f"/api/admin/venues/{created['venue_id']}", json={"is_available": False, "capacity": 150}
        )

        assert response.status_code == 200
        assert response.json()["is_available"] is False
        assert response.json()["capacity"] == 150
        assert response.json()["venue_name"] == "Grand Hall"

    async def test_get_and_delete(self, client: AsyncClient):
        created = (await client.post("/api/admin/venues", json=VENUE)).json()
        venue_id = created["venue_id"]

        assert (await client.get(f"/api/admin/venues/{venue_id}")).status_code == 200
        assert (await client.delete(f"/api/admin/venues/{venue_id}")).status_code == 204
        assert (await client.get(f"/api/admin/venues/{venue_id}")).status_code == 404
        assert (await client.delete(f"/api/admin/venues/{venue_id}")).status_code == 404

    async def test_update_missing(self, client: AsyncClient):
        response = await client.put("/api/admin/venues/77", json={"capacity": 10})
        assert response.status_code == 404
