"""
Booking repository.

Besides plain CRUD this repository produces the joined booking view shown
in the admin console (customer, venue and event names per booking).
"""

from __future__ import annotations

from typing import Any, Dict, List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.bookings import Booking
from ..entities.customers import Customer
from ..entities.events import Event
from ..entities.venues import Venue
from .base import AsyncBaseRepository


class BookingRepository(AsyncBaseRepository[Booking]):
    """Repository for booking data access operations."""

    default_order = (Booking.booking_date.desc(), Booking.booking_id.desc())

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Booking)

    async def list_detailed(self) -> List[Dict[str, Any]]:
        """List bookings joined with customer, venue and event names.

        Bookings without an event keep a ``None`` event name.

        Returns:
            One dictionary per booking, newest first
        """
        stmt = (
            select(
                Booking.booking_id,
                Booking.customer_id,
                Customer.full_name,
                Booking.venue_id,
                Venue.venue_name,
                Booking.event_id,
                Event.event_name,
                Booking.booking_date,
                Booking.start_time,
                Booking.end_time,
                Booking.status,
                Booking.total_amount,
            )
            .join(Customer, Booking.customer_id == Customer.customer_id)
            .join(Venue, Booking.venue_id == Venue.venue_id)
            .outerjoin(Event, Booking.event_id == Event.event_id)
            .order_by(*self.default_order)
        )
        result = await self.session.execute(stmt)
        return [dict(row._mapping) for row in result.all()]
