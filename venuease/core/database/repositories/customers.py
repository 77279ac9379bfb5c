"""
Customer repository.

Data access for customer accounts, including lookups by email used by
registration and login.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.customers import Customer
from .base import AsyncBaseRepository


class CustomerRepository(AsyncBaseRepository[Customer]):
    """Repository for customer data access operations."""

    default_order = (Customer.date_created.desc(), Customer.customer_id.desc())

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Customer)

    async def get_by_email(self, email: str) -> Optional[Customer]:
        """Get a customer by login email.

        Args:
            email: Email address, compared case-insensitively

        Returns:
            Customer instance or None
        """
        stmt = select(Customer).where(Customer.email == email.strip().lower())
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def set_active(self, customer: Customer, is_active: bool) -> Customer:
        """Activate or deactivate a customer account."""
        return await self.update(customer, {"is_active": is_active})
