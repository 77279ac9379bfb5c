"""
Booking entity model.

A booking reserves a venue for a customer over a time window, optionally
for a specific event.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, utc_now


class BookingBase(Base):
    """Base fields for a booking."""

    customer_id: int = Field(foreign_key="customers.customer_id", index=True)
    venue_id: int = Field(foreign_key="venue.venue_id", index=True)
    event_id: Optional[int] = Field(default=None, foreign_key="events.event_id")
    start_time: datetime
    end_time: datetime
    status: str = Field(default="pending", max_length=32, description="pending, confirmed, cancelled or completed")
    total_amount: float = Field(default=0.0, ge=0.0)


class Booking(BookingBase, table=True):
    """Persistent booking.

    Table: booking
    """

    __tablename__ = "booking"
    __table_args__ = ({"extend_existing": True},)

    booking_id: Optional[int] = Field(default=None, primary_key=True)
    booking_date: datetime = Field(default_factory=utc_now, index=True)

    def __repr__(self) -> str:
        return f"Booking(id={self.booking_id}, venue={self.venue_id}, status={self.status})"
