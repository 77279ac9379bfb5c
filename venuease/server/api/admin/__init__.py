"""
Admin console API.

Every router in this package is mounted under ``/api/admin``.
"""

from fastapi import APIRouter

from . import auth, bookings, customers, database, events, payments, staff, venues

router = APIRouter()
router.include_router(auth.router)
router.include_router(staff.create_alias_router)
router.include_router(customers.router, prefix="/customers")
router.include_router(staff.router, prefix="/staff")
router.include_router(venues.router, prefix="/venues")
router.include_router(events.router, prefix="/events")
router.include_router(bookings.router, prefix="/bookings")
router.include_router(payments.router, prefix="/payments")
router.include_router(database.router, prefix="/database")

__all__ = ["router"]
