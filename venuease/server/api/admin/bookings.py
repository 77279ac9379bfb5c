"""
Booking management endpoints of the admin console.

The list view joins each booking with its customer, venue and event names.
References are checked before writing so a dangling id answers 400 instead
of relying on the engine's foreign key enforcement.
"""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException, Response, status

from venuease.core.database.entities import Booking
from venuease.core.database.repositories import RepoBundle
from venuease.core.logging_config import get_logger
from venuease.core.models.io import BookingCreate, BookingDetailRead, BookingRead, BookingUpdate
from venuease.server.services.deps import ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["admin-bookings"])


async def _get_booking_or_404(repos: RepoBundle, booking_id: int) -> Booking:
    booking = await repos.bookings.get_by_id(booking_id)
    if booking is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Booking {booking_id} not found")
    return booking


async def _check_references(repos: RepoBundle, fields: Dict[str, Any]) -> None:
    """Reject ids that point at missing customers, venues or events."""
    lookups = (
        ("customer_id", repos.customers, "Customer"),
        ("venue_id", repos.venues, "Venue"),
        ("event_id", repos.events, "Event"),
    )
    for key, repo, label in lookups:
        value = fields.get(key)
        if value is not None and await repo.get_by_id(value) is None:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"{label} {value} not found")


@router.get("", response_model=List[BookingDetailRead], summary="List Bookings")
async def list_bookings(repos: ReposDep) -> List[BookingDetailRead]:
    """
    List bookings, newest first.

    Each row carries the customer's full name, the venue name and, when the
    booking is for an event, the event name.
    """
    rows = await repos.bookings.list_detailed()
    return [BookingDetailRead.model_validate(row) for row in rows]


@router.post(
    "",
    response_model=BookingRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Booking",
    responses={400: {"description": "Unknown customer, venue or event, or invalid time window"}},
)
async def create_booking(payload: BookingCreate, repos: ReposDep) -> BookingRead:
    """
    Create a booking.

    - **customer_id**: Customer making the booking.
    - **venue_id**: Venue being reserved.
    - **event_id**: Optional event the booking is for.
    - **start_time** / **end_time**: Reserved window; the end must be after the start.
    - **status**: pending, confirmed, cancelled or completed.
    """
    await _check_references(repos, payload.model_dump())
    booking = Booking(
        customer_id=payload.customer_id,
        venue_id=payload.venue_id,
        event_id=payload.event_id,
        start_time=payload.start_time,
        end_time=payload.end_time,
        status=payload.status.value,
        total_amount=payload.total_amount,
    )
    booking = await repos.bookings.create(booking)
    logger.info(f"Created booking {booking.booking_id} for venue {booking.venue_id}")
    return BookingRead.model_validate(booking)


@router.get(
    "/{booking_id}",
    response_model=BookingRead,
    summary="Get Booking",
    responses={404: {"description": "Booking not found"}},
)
async def get_booking(booking_id: int, repos: ReposDep) -> BookingRead:
    return BookingRead.model_validate(await _get_booking_or_404(repos, booking_id))


@router.put(
    "/{booking_id}",
    response_model=BookingRead,
    summary="Update Booking",
    responses={
        400: {"description": "Unknown venue or event, or invalid time window"},
        404: {"description": "Booking not found"},
    },
)
async def update_booking(booking_id: int, payload: BookingUpdate, repos: ReposDep) -> BookingRead:
    """Partially update a booking. The resulting window must still end after it starts."""
    booking = await _get_booking_or_404(repos, booking_id)
    changes = payload.model_dump(exclude_unset=True)
    await _check_references(repos, changes)

    start_time = changes.get("start_time") or booking.start_time
    end_time = changes.get("end_time") or booking.end_time
    if end_time <= start_time:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="end_time must be after start_time")
    if changes.get("status") is not None:
        changes["status"] = payload.status.value

    booking = await repos.bookings.update(booking, changes)
    return BookingRead.model_validate(booking)


@router.delete(
    "/{booking_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Booking",
    responses={404: {"description": "Booking not found"}},
)
async def delete_booking(booking_id: int, repos: ReposDep) -> Response:
    """Delete a booking together with the payments recorded against it."""
    booking = await _get_booking_or_404(repos, booking_id)
    for payment in await repos.payments.list_for_booking(booking.booking_id):
        await repos.payments.session.delete(payment)
    await repos.bookings.delete(booking_id)
    logger.info(f"Deleted booking {booking_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
