"""Repository bundle for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .admins import AdminRepository
from .bookings import BookingRepository
from .customers import CustomerRepository
from .events import EventRepository
from .payments import PaymentRepository
from .venues import VenueRepository


@dataclass(frozen=True)
class RepoBundle:
    """Convenience bundle of all repositories sharing one session."""

    customers: CustomerRepository
    staff: AdminRepository
    venues: VenueRepository
    events: EventRepository
    bookings: BookingRepository
    payments: PaymentRepository


def build_repos(session: AsyncSession) -> RepoBundle:
    """Build a ``RepoBundle`` over a single session.

    Args:
        session: Async session shared by every repository

    Returns:
        Bundle containing all repository instances
    """
    return RepoBundle(
        customers=CustomerRepository(session),
        staff=AdminRepository(session),
        venues=VenueRepository(session),
        events=EventRepository(session),
        bookings=BookingRepository(session),
        payments=PaymentRepository(session),
    )
