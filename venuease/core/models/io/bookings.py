"""
Booking I/O models for API requests and responses.

``BookingDetailRead`` is the joined list view used by the admin console.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from venuease.core.models.domain.enums import BookingStatus


class BookingCreate(BaseModel):
    """Schema for creating a booking."""

    customer_id: int
    venue_id: int
    event_id: Optional[int] = None
    start_time: datetime
    end_time: datetime
    status: BookingStatus = BookingStatus.pending
    total_amount: float = Field(default=0.0, ge=0.0)

    @model_validator(mode="after")
    def _check_window(self) -> "BookingCreate":
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        return self


class BookingRead(BaseModel):
    booking_id: int
    customer_id: int
    venue_id: int
    event_id: Optional[int] = None
    booking_date: datetime
    start_time: datetime
    end_time: datetime
    status: str
    total_amount: float

    model_config = ConfigDict(from_attributes=True)


class BookingDetailRead(BaseModel):
    """Booking joined with the names of its customer, venue and event."""

    booking_id: int
    customer_id: int
    full_name: str
    venue_id: int
    venue_name: str
    event_id: Optional[int] = None
    event_name: Optional[str] = None
    booking_date: datetime
    start_time: datetime
    end_time: datetime
    status: str
    total_amount: float


class BookingUpdate(BaseModel):
    """Partial update. The resulting time window is re-checked by the endpoint."""

    venue_id: Optional[int] = None
    event_id: Optional[int] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    status: Optional[BookingStatus] = None
    total_amount: Optional[float] = Field(default=None, ge=0.0)
