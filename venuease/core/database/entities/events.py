"""Event entity model."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base


class EventBase(Base):
    """Base fields for an event hosted at a venue."""

    event_name: str = Field(max_length=150)
    event_type: Optional[str] = Field(default=None, max_length=64, description="Wedding, conference, party, ...")
    event_date: datetime = Field(index=True)
    description: Optional[str] = Field(default=None)


class Event(EventBase, table=True):
    """Persistent event.

    Table: events
    """

    __tablename__ = "events"
    __table_args__ = ({"extend_existing": True},)

    event_id: Optional[int] = Field(default=None, primary_key=True)

    def __repr__(self) -> str:
        return f"Event(id={self.event_id}, name={self.event_name})"
