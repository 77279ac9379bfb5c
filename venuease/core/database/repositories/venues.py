"""Venue repository."""

from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.venues import Venue
from .base import AsyncBaseRepository


class VenueRepository(AsyncBaseRepository[Venue]):
    """Repository for venue data access operations."""

    default_order = (Venue.venue_name,)

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Venue)

    async def list_available(self) -> List[Venue]:
        """Venues currently open for booking, by name."""
        return await self.list(filters={"is_available": True})
