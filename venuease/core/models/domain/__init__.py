"""Domain enums shared by entities and I/O schemas."""

from .enums import BookingStatus, PaymentStatus, StaffRole, UserType

__all__ = ["BookingStatus", "PaymentStatus", "StaffRole", "UserType"]
