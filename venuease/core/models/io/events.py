"""Event I/O models for API requests and responses."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class EventCreate(BaseModel):
    event_name: str = Field(min_length=1, max_length=150)
    event_type: Optional[str] = Field(default=None, max_length=64)
    event_date: datetime
    description: Optional[str] = None


class EventRead(BaseModel):
    event_id: int
    event_name: str
    event_type: Optional[str] = None
    event_date: datetime
    description: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class EventUpdate(BaseModel):
    event_name: Optional[str] = Field(default=None, min_length=1, max_length=150)
    event_type: Optional[str] = Field(default=None, max_length=64)
    event_date: Optional[datetime] = None
    description: Optional[str] = None
