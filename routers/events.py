"""Company event endpoints. Events are create-only."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from config.storage import get_storage
from repositories.storage import MemStorage
from schemas.common import ErrorResponse
from schemas.event import Event, EventCreate

router = APIRouter()

DEFAULT_UPCOMING_LIMIT = 5


@router.get("/events", response_model=list[Event])
async def list_events(
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> list[Event]:
    return await storage.get_all_events()


@router.get("/events/upcoming", response_model=list[Event])
async def list_upcoming_events(
    storage: Annotated[MemStorage, Depends(get_storage)],
    limit: Annotated[int, Query(ge=0)] = DEFAULT_UPCOMING_LIMIT,
) -> list[Event]:
    """Return events that have not started yet, soonest first."""
    return await storage.get_upcoming_events(limit)


@router.get(
    "/events/{event_id}",
    response_model=Event,
    responses={404: {"model": ErrorResponse}},
)
async def get_event(
    event_id: int,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> Event:
    event = await storage.get_event(event_id)
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return event


@router.post(
    "/events",
    response_model=Event,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_event(
    payload: EventCreate,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> Event:
    return await storage.create_event(payload)
