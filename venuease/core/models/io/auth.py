"""Login I/O models shared by the customer and staff login endpoints."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from venuease.core.models.domain.enums import UserType


class LoginRequest(BaseModel):
    """Credentials submitted to a login endpoint."""

    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserProfile(BaseModel):
    """Profile of the authenticated account."""

    user_id: int
    full_name: str
    email: str
    phone: Optional[str] = None
    role: str
    user_type: UserType


class LoginResponse(BaseModel):
    message: str = "Login successful"
    user: UserProfile
