"""Venue management endpoints of the admin console."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, Response, status
from sqlalchemy.exc import IntegrityError

from venuease.core.database.entities import Venue
from venuease.core.models.io import VenueCreate, VenueRead, VenueUpdate
from venuease.server.services.deps import ReposDep

router = APIRouter(tags=["admin-venues"])


async def _get_venue_or_404(repos: ReposDep, venue_id: int) -> Venue:
    venue = await repos.venues.get_by_id(venue_id)
    if venue is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Venue {venue_id} not found")
    return venue


@router.get("", response_model=List[VenueRead], summary="List Venues")
async def list_venues(repos: ReposDep) -> List[VenueRead]:
    """All venues, including unavailable ones, ordered by name."""
    return [VenueRead.model_validate(v) for v in await repos.venues.list()]


@router.post("", response_model=VenueRead, status_code=status.HTTP_201_CREATED, summary="Create Venue")
async def create_venue(payload: VenueCreate, repos: ReposDep) -> VenueRead:
    """
    Create a venue.

    - **venue_name**: Display name of the venue.
    - **address**: Street address.
    - **capacity**: Maximum number of guests, greater than zero.
    - **price**: Base price per booking.
    - **is_available**: Whether the venue is listed on the booking site.
    """
    venue = await repos.venues.create(Venue.model_validate(payload.model_dump()))
    return VenueRead.model_validate(venue)


@router.get(
    "/{venue_id}",
    response_model=VenueRead,
    summary="Get Venue",
    responses={404: {"description": "Venue not found"}},
)
async def get_venue(venue_id: int, repos: ReposDep) -> VenueRead:
    return VenueRead.model_validate(await _get_venue_or_404(repos, venue_id))


@router.put(
    "/{venue_id}",
    response_model=VenueRead,
    summary="Update Venue",
    responses={404: {"description": "Venue not found"}},
)
async def update_venue(venue_id: int, payload: VenueUpdate, repos: ReposDep) -> VenueRead:
    venue = await _get_venue_or_404(repos, venue_id)
    venue = await repos.venues.update(venue, payload.model_dump(exclude_unset=True))
    return VenueRead.model_validate(venue)


@router.delete(
    "/{venue_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Venue",
    responses={
        400: {"description": "Venue still has bookings"},
        404: {"description": "Venue not found"},
    },
)
async def delete_venue(venue_id: int, repos: ReposDep) -> Response:
    try:
        deleted = await repos.venues.delete(venue_id)
    except IntegrityError as e:
        await repos.venues.session.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Venue {venue_id} still has bookings") from e
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Venue {venue_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
