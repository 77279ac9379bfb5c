"""Public venue listing for the booking site."""

from typing import List

from fastapi import APIRouter, HTTPException, status

from venuease.core.models.io import VenueRead
from venuease.server.services.deps import ReposDep

router = APIRouter(tags=["venues"])


@router.get("", response_model=List[VenueRead], summary="List Available Venues")
async def list_available_venues(repos: ReposDep) -> List[VenueRead]:
    """Venues currently open for booking, ordered by name."""
    venues = await repos.venues.list_available()
    return [VenueRead.model_validate(venue) for venue in venues]


@router.get(
    "/{venue_id}",
    response_model=VenueRead,
    summary="Get Venue",
    responses={404: {"description": "Venue not found or not available"}},
)
async def get_available_venue(venue_id: int, repos: ReposDep) -> VenueRead:
    venue = await repos.venues.get_by_id(venue_id)
    if venue is None or not venue.is_available:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Venue {venue_id} not found")
    return VenueRead.model_validate(venue)
