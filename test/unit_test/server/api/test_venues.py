"""Unit tests for the public venue listing."""

import pytest
from httpx import AsyncClient

from venuease.core.database.entities import Venue

pytestmark = pytest.mark.asyncio


@pytest.fixture
def make_venue(repos):
    async def _make(name: str, available: bool = True) -> Venue:
        return await repos.venues.create(
            Venue(venue_name=name, address="1 Main St", capacity=100, price=250.0, is_available=available)
        )

    return _make


class TestPublicVenues:
    async def test_lists_only_available_venues(self, client: AsyncClient, make_venue):
        await make_venue("Zen Garden")
        await make_venue("Atrium")
        await make_venue("Closed Hall", available=False)

        response = await client.get("/api/venues")

        assert response.status_code == 200
        assert [v["venue_name"] for v in response.json()] == ["Atrium", "Zen Garden"]

    async def test_get_available_venue(self, client: AsyncClient, make_venue):
        venue = await make_venue("Atrium")

        response = await client.get(f"/api/venues/{venue.venue_id}")

        assert response.status_code == 200
        assert response.json()["price"] == 250.0

    async def test_unavailable_venue_is_hidden(self, client: AsyncClient, make_venue):
        venue = await make_venue("Closed Hall", available=False)

        response = await client.get(f"/api/venues/{venue.venue_id}")

        assert response.status_code == 404
        assert response.json() == {"error": f"Venue {venue.venue_id} not found"}
