"""Unit tests for payment management in the admin console."""

from datetime import datetime, timedelta

import pytest
import pytest_asyncio
from httpx import AsyncClient

from venuease.core.database.entities import Booking, Customer, Venue

pytestmark = pytest.mark.asyncio


@pytest_asyncio.fixture
async def booking_id(repos) -> int:
    customer = await repos.customers.create(Customer(full_name="Ada", email="ada@example.com", password_hash="x"))
    venue = await repos.venues.create(Venue(venue_name="Hall", address="1 Main St", capacity=50))
    start = datetime(2026, 7, 1, 12)
    booking = await repos.bookings.create(
        Booking(
            customer_id=customer.customer_id,
            venue_id=venue.venue_id,
            start_time=start,
            end_time=start + timedelta(hours=3),
        )
    )
    return booking.booking_id


class TestPayments:
    async def test_record_payment(self, client: AsyncClient, booking_id):
        response = await client.post(
            "/api/admin/payments",
            json={"booking_id": booking_id, "amount": 250.0, "payment_method": "card", "transaction_ref": "TX-1"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["payment_status"] == "pending"
        assert data["transaction_ref"] == "TX-1"

    async def test_unknown_booking(self, client: AsyncClient):
        response = await client.post(
            "/api/admin/payments", json={"booking_id": 999, "amount": 10.0, "payment_method": "cash"}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Booking 999 not found"}

    async def test_amount_must_be_positive(self, client: AsyncClient, booking_id):
        response = await client.post(
            "/api/admin/payments", json={"booking_id": booking_id, "amount": 0, "payment_method": "cash"}
        )
        assert response.status_code == 400

    async def test_list_filtered_by_booking(self, client: AsyncClient, booking_id):
        for amount in (100.0, 150.0):
            await client.post(
                "/api/admin/payments", json={"booking_id": booking_id, "amount": amount, "payment_method": "card"}
            )

        everything = await client.get("/api/admin/payments")
        for_booking = await client.get("/api/admin/payments", params={"booking_id": booking_id})
        other = await client.get("/api/admin/payments", params={"booking_id": booking_id + 1})

        assert len(everything.json()) == 2
        assert sorted(p["amount"] for p in for_booking.json()) == [100.0, 150.0]
        assert other.json() == []

    async def test_update_status(self, client: AsyncClient, booking_id):
        created = (
            await client.post(
                "/api/admin/payments", json={"booking_id": booking_id, "amount": 80.0, "payment_method": "card"}
            )
        ).json()

        response = await client.put(
            f"/api/admin/payments/{created['payment_id']}", json={"payment_status": "completed"}
        )

        assert response.status_code == 200
        assert response.json()["payment_status"] == "completed"
        assert response.json()["amount"] == 80.0

    async def test_get_and_delete(self, client: AsyncClient, booking_id):
        created = (
            await client.post(
                "/api/admin/payments", json={"booking_id": booking_id, "amount": 80.0, "payment_method": "card"}
            )
        ).json()
        payment_id = created["payment_id"]

        assert (await client.get(f"/api/admin/payments/{payment_id}")).status_code == 200
        assert (await client.delete(f"/api/admin/payments/{payment_id}")).status_code == 204
        assert (await client.get(f"/api/admin/payments/{payment_id}")).status_code == 404
