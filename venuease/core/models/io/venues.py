"""Venue I/O models for API requests and responses."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class VenueCreate(BaseModel):
    """Schema for creating a venue."""

    venue_name: str = Field(min_length=1, max_length=150)
    address: str = Field(min_length=1, max_length=255)
    capacity: int = Field(gt=0, description="Maximum number of guests")
    price: float = Field(default=0.0, ge=0.0, description="Base price per booking")
    description: Optional[str] = None
    contact_email: Optional[str] = Field(default=None, max_length=255)
    contact_phone: Optional[str] = Field(default=None, max_length=32)
    is_available: bool = True


class VenueRead(BaseModel):
    """Schema for reading a venue."""

    venue_id: int
    venue_name: str
    address: str
    capacity: int
    price: float
    description: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    is_available: bool
    date_created: datetime

    model_config = ConfigDict(from_attributes=True)


class VenueUpdate(BaseModel):
    """Schema for partially updating a venue."""

    venue_name: Optional[str] = Field(default=None, min_length=1, max_length=150)
    address: Optional[str] = Field(default=None, min_length=1, max_length=255)
    capacity: Optional[int] = Field(default=None, gt=0)
    price: Optional[float] = Field(default=None, ge=0.0)
    description: Optional[str] = None
    contact_email: Optional[str] = Field(default=None, max_length=255)
    contact_phone: Optional[str] = Field(default=None, max_length=32)
    is_available: Optional[bool] = None
