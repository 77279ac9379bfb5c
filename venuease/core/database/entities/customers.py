"""
Customer entity model.

Customers are the accounts of the booking site. They register themselves
and can be deactivated by staff from the admin console.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, utc_now


class CustomerBase(Base):
    """Base fields for a customer account."""

    full_name: str = Field(max_length=120, description="Customer full name")
    email: str = Field(max_length=255, unique=True, index=True, description="Login email, unique per customer")
    phone: Optional[str] = Field(default=None, max_length=32, description="Contact phone number")
    is_active: bool = Field(default=True, description="Inactive customers cannot log in")


class Customer(CustomerBase, table=True):
    """Persistent customer account.

    Table: customers
    """

    __tablename__ = "customers"
    __table_args__ = ({"extend_existing": True},)

    customer_id: Optional[int] = Field(default=None, primary_key=True)
    password_hash: str = Field(max_length=255)
    date_created: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"Customer(id={self.customer_id}, email={self.email})"
