"""Event repository."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.events import Event
from .base import AsyncBaseRepository


class EventRepository(AsyncBaseRepository[Event]):
    """Repository for event data access operations."""

    default_order = (Event.event_date.desc(),)

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Event)
