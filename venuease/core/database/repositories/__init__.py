"""
Repository layer for database access.

One repository per entity, all built on ``AsyncBaseRepository``, plus a
``RepoBundle`` that groups them over a shared session.
"""

from .admins import AdminRepository
from .base import AsyncBaseRepository, StatementBuilder
from .bookings import BookingRepository
from .bundle import RepoBundle, build_repos
from .customers import CustomerRepository
from .events import EventRepository
from .payments import PaymentRepository
from .venues import VenueRepository

__all__ = [
    "AdminRepository",
    "AsyncBaseRepository",
    "BookingRepository",
    "CustomerRepository",
    "EventRepository",
    "PaymentRepository",
    "RepoBundle",
    "StatementBuilder",
    "VenueRepository",
    "build_repos",
]
