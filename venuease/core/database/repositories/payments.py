"""Payment repository."""

from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.payments import Payment
from .base import AsyncBaseRepository


class PaymentRepository(AsyncBaseRepository[Payment]):
    """Repository for payment data access operations."""

    default_order = (Payment.payment_date.desc(), Payment.payment_id.desc())

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Payment)

    async def list_for_booking(self, booking_id: int) -> List[Payment]:
        """Payments recorded against one booking, newest first."""
        return await self.list(filters={"booking_id": booking_id})
