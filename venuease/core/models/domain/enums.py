"""Domain enums for venue-booking models."""

from __future__ import annotations

from enum import Enum


class StaffRole(str, Enum):
    """Role of an admin-console account."""

    admin = "admin"
    manager = "manager"
    staff = "staff"


class BookingStatus(str, Enum):
    """Lifecycle status of a booking."""

    pending = "pending"
    confirmed = "confirmed"
    cancelled = "cancelled"
    completed = "completed"


class PaymentStatus(str, Enum):
    """Settlement status of a payment."""

    pending = "pending"
    completed = "completed"
    failed = "failed"
    refunded = "refunded"


class UserType(str, Enum):
    """Kind of account returned by the login endpoints."""

    customer = "customer"
    admin = "admin"
