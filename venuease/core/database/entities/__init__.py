"""
Database entity models.

One module per table:

- customers: Customer accounts of the booking site
- admins: Staff accounts of the admin console
- venues: Bookable venues
- events: Events hosted at venues
- bookings: Venue reservations
- payments: Payments against bookings
"""

from .admins import Admin
from .bookings import Booking
from .customers import Customer
from .events import Event
from .payments import Payment
from .venues import Venue

__all__ = [
    "Admin",
    "Booking",
    "Customer",
    "Event",
    "Payment",
    "Venue",
]
