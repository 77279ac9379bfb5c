"""Unit tests for event management in the admin console."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

EVENT = {"event_name": "New Year Gala", "event_type": "party", "event_date": "2026-12-31T20:00:00"}


class TestEventCrud:
    async def test_create(self, client: AsyncClient):
        response = await client.post("/api/admin/events", json=EVENT)

        assert response.status_code == 201
        data = response.json()
        assert data["event_name"] == "New Year Gala"
        assert data["event_date"].startswith("2026-12-31T20:00:00")

    async def test_create_requires_date(self, client: AsyncClient):
        response = await client.post("/api/admin/events", json={"event_name": "Undated"})
        assert response.status_code == 400

    async def test_list_latest_first(self, client: AsyncClient):
        await client.post("/api/admin/events", json={**EVENT, "event_name": "Early", "event_date": "2026-01-01T10:00:00"})
        await client.post("/api/admin/events", json={**EVENT, "event_name": "Late", "event_date": "2026-11-01T10:00:00"})

        response = await client.get("/api/admin/events")

        assert [e["event_name"] for e in response.json()] == ["Late", "Early"]

    async def test_update_get_delete(self, client: AsyncClient):
        created = (await client.post("/api/admin/events", json=EVENT)).json()
        event_id = created["event_id"]

        updated = await client.put(f"/api/admin/events/{event_id}", json={"description": "Black tie"})
        assert updated.status_code == 200
        assert updated.json()["description"] == "Black tie"
        assert updated.json()["event_type"] == "party"

        assert (await client.get(f"/api/admin/events/{event_id}")).json()["description"] == "Black tie"
        assert (await client.delete(f"/api/admin/events/{event_id}")).status_code == 204
        assert (await client.get(f"/api/admin/events/{event_id}")).status_code == 404
