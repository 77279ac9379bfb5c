"""
Staff (admin) repository.

Data access for admin-console accounts.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.admins import Admin
from .base import AsyncBaseRepository


class AdminRepository(AsyncBaseRepository[Admin]):
    """Repository for staff account data access operations."""

    # Grouped by role, newest accounts first within a role
    default_order = (Admin.role, Admin.date_created.desc(), Admin.admin_id.desc())

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Admin)

    async def get_by_email(self, email: str) -> Optional[Admin]:
        """Get a staff account by login email (case-insensitive)."""
        stmt = select(Admin).where(Admin.email == email.strip().lower())
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def count(self) -> int:
        """Number of staff accounts."""
        result = await self.session.execute(select(func.count()).select_from(Admin))
        return int(result.scalar_one())
