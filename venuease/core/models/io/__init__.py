"""
I/O models for API requests and responses.

These schemas are the contract between the endpoints and their clients and
are kept separate from the database entities.
"""

from .auth import LoginRequest, LoginResponse, UserProfile
from .bookings import BookingCreate, BookingDetailRead, BookingRead, BookingUpdate
from .common import ErrorResponse
from .customers import (
    CustomerRead,
    CustomerRegister,
    CustomerRegistered,
    CustomerStatusUpdate,
    CustomerUpdate,
)
from .events import EventCreate, EventRead, EventUpdate
from .payments import PaymentCreate, PaymentRead, PaymentUpdate
from .query import (
    QueryErrorResponse,
    QueryRequest,
    QueryResponse,
    SchemaColumnRead,
    SchemaTableRead,
)
from .staff import StaffCreate, StaffRead, StaffUpdate
from .venues import VenueCreate, VenueRead, VenueUpdate

__all__ = [
    "BookingCreate",
    "BookingDetailRead",
    "BookingRead",
    "BookingUpdate",
    "CustomerRead",
    "CustomerRegister",
    "CustomerRegistered",
    "CustomerStatusUpdate",
    "CustomerUpdate",
    "ErrorResponse",
    "EventCreate",
    "EventRead",
    "EventUpdate",
    "LoginRequest",
    "LoginResponse",
    "PaymentCreate",
    "PaymentRead",
    "PaymentUpdate",
    "QueryErrorResponse",
    "QueryRequest",
    "QueryResponse",
    "SchemaColumnRead",
    "SchemaTableRead",
    "StaffCreate",
    "StaffRead",
    "StaffUpdate",
    "UserProfile",
    "VenueCreate",
    "VenueRead",
    "VenueUpdate",
]
