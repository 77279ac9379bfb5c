"""
Customer I/O models for API requests and responses.

Covers self-registration on the booking site and customer management in
the admin console.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import EmailAddress


class CustomerRegister(BaseModel):
    """Schema for customer self-registration."""

    full_name: str = Field(min_length=1, max_length=120, description="Customer full name")
    email: EmailAddress = Field(description="Login email, unique per customer")
    password: str = Field(min_length=6, max_length=128, description="Plain-text password, stored hashed")
    phone: Optional[str] = Field(default=None, max_length=32, description="Contact phone number")


class CustomerRegistered(BaseModel):
    """Schema returned after a successful registration."""

    message: str
    customer_id: int
    full_name: str
    email: str


class CustomerRead(BaseModel):
    """Schema for reading a customer from the API. Never exposes the password hash."""

    customer_id: int
    full_name: str
    email: str
    phone: Optional[str] = None
    date_created: datetime
    is_active: bool

    model_config = ConfigDict(from_attributes=True)


class CustomerUpdate(BaseModel):
    """Schema for updating a customer via the admin console."""

    full_name: Optional[str] = Field(default=None, min_length=1, max_length=120)
    email: Optional[EmailAddress] = None
    phone: Optional[str] = Field(default=None, max_length=32)
    is_active: Optional[bool] = None


class CustomerStatusUpdate(BaseModel):
    """Schema for activating or deactivating a customer."""

    is_active: bool
