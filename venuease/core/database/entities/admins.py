"""
Admin (staff) entity model.

Admin rows are the accounts of the admin console: administrators,
managers and regular staff.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, utc_now


class AdminBase(Base):
    """Base fields for a staff account."""

    full_name: str = Field(max_length=120, description="Staff member full name")
    email: str = Field(max_length=255, unique=True, index=True, description="Login email, unique per account")
    role: str = Field(default="staff", max_length=32, description="admin, manager or staff")
    is_active: bool = Field(default=True, description="Inactive accounts cannot log in")


class Admin(AdminBase, table=True):
    """Persistent staff account.

    Table: admin
    """

    __tablename__ = "admin"
    __table_args__ = ({"extend_existing": True},)

    admin_id: Optional[int] = Field(default=None, primary_key=True)
    password_hash: str = Field(max_length=255)
    date_created: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"Admin(id={self.admin_id}, email={self.email}, role={self.role})"
