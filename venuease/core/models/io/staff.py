"""Staff (admin account) I/O models for API requests and responses."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from venuease.core.models.domain.enums import StaffRole

from .common import EmailAddress


class StaffCreate(BaseModel):
    """Schema for creating a staff account."""

    full_name: str = Field(min_length=1, max_length=120)
    email: EmailAddress
    password: str = Field(min_length=6, max_length=128)
    role: StaffRole = Field(default=StaffRole.staff)


class StaffRead(BaseModel):
    """Schema for reading a staff account. Never exposes the password hash."""

    admin_id: int
    full_name: str
    email: str
    role: str
    date_created: datetime
    is_active: bool

    model_config = ConfigDict(from_attributes=True)


class StaffUpdate(BaseModel):
    """Schema for updating a staff account. A new password is re-hashed."""

    full_name: Optional[str] = Field(default=None, min_length=1, max_length=120)
    email: Optional[EmailAddress] = None
    password: Optional[str] = Field(default=None, min_length=6, max_length=128)
    role: Optional[StaffRole] = None
    is_active: Optional[bool] = None
