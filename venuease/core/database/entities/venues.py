"""Venue entity model."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, utc_now


class VenueBase(Base):
    """Base fields for a bookable venue."""

    venue_name: str = Field(max_length=150, index=True)
    address: str = Field(max_length=255)
    capacity: int = Field(gt=0, description="Maximum number of guests")
    price: float = Field(default=0.0, ge=0.0, description="Base price per booking")
    description: Optional[str] = Field(default=None)
    contact_email: Optional[str] = Field(default=None, max_length=255)
    contact_phone: Optional[str] = Field(default=None, max_length=32)
    is_available: bool = Field(default=True, description="Only available venues are listed publicly")


class Venue(VenueBase, table=True):
    """Persistent venue.

    Table: venue
    """

    __tablename__ = "venue"
    __table_args__ = ({"extend_existing": True},)

    venue_id: Optional[int] = Field(default=None, primary_key=True)
    date_created: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"Venue(id={self.venue_id}, name={self.venue_name})"
