"""Event management endpoints of the admin console."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, Response, status
from sqlalchemy.exc import IntegrityError

from venuease.core.database.entities import Event
from venuease.core.models.io import EventCreate, EventRead, EventUpdate
from venuease.server.services.deps import ReposDep

router = APIRouter(tags=["admin-events"])


async def _get_event_or_404(repos: ReposDep, event_id: int) -> Event:
    event = await repos.events.get_by_id(event_id)
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Event {event_id} not found")
    return event


@router.get("", response_model=List[EventRead], summary="List Events")
async def list_events(repos: ReposDep) -> List[EventRead]:
    """Events ordered by date, latest first."""
    return [EventRead.model_validate(e) for e in await repos.events.list()]


@router.post("", response_model=EventRead, status_code=status.HTTP_201_CREATED, summary="Create Event")
async def create_event(payload: EventCreate, repos: ReposDep) -> EventRead:
    event = await repos.events.create(Event.model_validate(payload.model_dump()))
    return EventRead.model_validate(event)


@router.get("/{event_id}", response_model=EventRead, summary="Get Event", responses={404: {"description": "Event not found"}})
async def get_event(event_id: int, repos: ReposDep) -> EventRead:
    return EventRead.model_validate(await _get_event_or_404(repos, event_id))


@router.put("/{event_id}", response_model=EventRead, summary="Update Event", responses={404: {"description": "Event not found"}})
async def update_event(event_id: int, payload: EventUpdate, repos: ReposDep) -> EventRead:
    event = await _get_event_or_404(repos, event_id)
    event = await repos.events.update(event, payload.model_dump(exclude_unset=True))
    return EventRead.model_validate(event)


@router.delete(
    "/{event_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Event",
    responses={
        400: {"description": "Event is referenced by bookings"},
        404: {"description": "Event not found"},
    },
)
async def delete_event(event_id: int, repos: ReposDep) -> Response:
    try:
        deleted = await repos.events.delete(event_id)
    except IntegrityError as e:
        await repos.events.session.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=f"Event {event_id} is referenced by bookings"
        ) from e
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Event {event_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
