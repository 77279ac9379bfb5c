"""
Unit tests for the entity repositories.

Tests cover the shared CRUD operations of the base repository and the
entity-specific lookups (email lookups, availability, joined booking view).
"""

from datetime import datetime, timedelta

import pytest

from venuease.core.database.entities import Admin, Booking, Customer, Event, Payment, Venue

pytestmark = pytest.mark.asyncio


def _customer(name: str = "Ada Lovelace", email: str = "ada@example.com") -> Customer:
    return Customer(full_name=name, email=email, password_hash="hash")


class TestBaseRepository:
    async def test_create_assigns_id(self, repos):
        customer = await repos.customers.create(_customer())
        assert customer.customer_id is not None
        assert customer.is_active is True

    async def test_get_by_id_missing(self, repos):
        assert await repos.customers.get_by_id(999) is None

    async def test_update_applies_changes(self, repos):
        customer = await repos.customers.create(_customer())
        updated = await repos.customers.update(customer, {"phone": "555-0100"})
        assert updated.phone == "555-0100"
        assert (await repos.customers.get_by_id(customer.customer_id)).phone == "555-0100"

    async def test_delete(self, repos):
        customer = await repos.customers.create(_customer())
        assert await repos.customers.delete(customer.customer_id) is True
        assert await repos.customers.delete(customer.customer_id) is False
        assert await repos.customers.get_by_id(customer.customer_id) is None

    async def test_list_with_pagination_and_filters(self, repos):
        for i in range(3):
            await repos.customers.create(_customer(f"C{i}", f"c{i}@example.com"))
        inactive = await repos.customers.create(_customer("Off", "off@example.com"))
        await repos.customers.set_active(inactive, False)

        assert len(await repos.customers.list()) == 4
        assert len(await repos.customers.list(limit=2)) == 2
        assert len(await repos.customers.list(limit=10, offset=3)) == 1
        filtered = await repos.customers.list(filters={"is_active": False, "unknown_field": 1})
        assert [c.email for c in filtered] == ["off@example.com"]


class TestEmailLookups:
    async def test_customer_lookup_is_case_insensitive(self, repos):
        await repos.customers.create(_customer())
        found = await repos.customers.get_by_email("  ADA@Example.com ")
        assert found is not None
        assert found.full_name == "Ada Lovelace"

    async def test_staff_lookup_and_count(self, repos):
        assert await repos.staff.count() == 0
        await repos.staff.create(Admin(full_name="Root", email="root@venuease.io", role="admin", password_hash="h"))
        assert await repos.staff.count() == 1
        assert (await repos.staff.get_by_email("ROOT@venuease.io")).role == "admin"
        assert await repos.staff.get_by_email("nobody@venuease.io") is None


class TestVenueRepository:
    async def test_list_available_sorted_by_name(self, repos):
        await repos.venues.create(Venue(venue_name="Zen Garden", address="a", capacity=10))
        await repos.venues.create(Venue(venue_name="Atrium", address="b", capacity=10))
        await repos.venues.create(Venue(venue_name="Closed Hall", address="c", capacity=10, is_available=False))

        names = [v.venue_name for v in await repos.venues.list_available()]
        assert names == ["Atrium", "Zen Garden"]


class TestBookingRepository:
    async def test_list_detailed_joins_names(self, repos):
        customer = await repos.customers.create(_customer())
        venue = await repos.venues.create(Venue(venue_name="Atrium", address="a", capacity=50))
        event = await repos.events.create(Event(event_name="Gala", event_date=datetime(2026, 12, 31, 18)))
        start = datetime(2026, 12, 31, 17)

        await repos.bookings.create(
            Booking(
                customer_id=customer.customer_id,
                venue_id=venue.venue_id,
                event_id=event.event_id,
                start_time=start,
                end_time=start + timedelta(hours=5),
                total_amount=1200.0,
            )
        )
        await repos.bookings.create(
            Booking(
                customer_id=customer.customer_id,
                venue_id=venue.venue_id,
                start_time=start,
                end_time=start + timedelta(hours=1),
            )
        )

        rows = await repos.bookings.list_detailed()

        assert len(rows) == 2
        by_event = {row["event_id"]: row for row in rows}
        assert by_event[event.event_id]["event_name"] == "Gala"
        assert by_event[event.event_id]["full_name"] == "Ada Lovelace"
        assert by_event[event.event_id]["venue_name"] == "Atrium"
        assert by_event[None]["event_name"] is None


class TestPaymentRepository:
    async def test_list_for_booking(self, repos):
        customer = await repos.customers.create(_customer())
        venue = await repos.venues.create(Venue(venue_name="Atrium", address="a", capacity=50))
        start = datetime(2026, 6, 1, 10)
        booking = await repos.bookings.create(
            Booking(
                customer_id=customer.customer_id,
                venue_id=venue.venue_id,
                start_time=start,
                end_time=start + timedelta(hours=2),
            )
        )
        await repos.payments.create(Payment(booking_id=booking.booking_id, amount=100.0, payment_method="card"))
        await repos.payments.create(Payment(booking_id=booking.booking_id, amount=50.0, payment_method="cash"))

        payments = await repos.payments.list_for_booking(booking.booking_id)
        assert sorted(p.amount for p in payments) == [50.0, 100.0]
        assert await repos.payments.list_for_booking(booking.booking_id + 1) == []
