"""Activity feed endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from config.storage import get_storage
from repositories.storage import MemStorage
from schemas.activity import Activity, ActivityCreate, ActivityStatusUpdate
from schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()

ACTIVITY_NOT_FOUND = "Activity not found"
DEFAULT_RECENT_LIMIT = 10


# Declared before /activities/{activity_id} so "recent" is not parsed as an id
@router.get("/activities/recent", response_model=list[Activity])
async def list_recent_activities(
    storage: Annotated[MemStorage, Depends(get_storage)],
    limit: Annotated[int, Query(ge=0, description="Maximum number of activities")] = DEFAULT_RECENT_LIMIT,
) -> list[Activity]:
    """Return the most recent activities, newest first."""
    return await storage.get_recent_activities(limit)


@router.get(
    "/activities/{activity_id}",
    response_model=Activity,
    responses={404: {"model": ErrorResponse}},
)
async def get_activity(
    activity_id: int,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> Activity:
    activity = await storage.get_activity(activity_id)
    if activity is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ACTIVITY_NOT_FOUND)
    return activity


@router.post(
    "/activities",
    response_model=Activity,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_activity(
    payload: ActivityCreate,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> Activity:
    return await storage.create_activity(payload)


@router.put(
    "/activities/{activity_id}/status",
    response_model=Activity,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_activity_status(
    activity_id: int,
    payload: ActivityStatusUpdate,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> Activity:
    # Any declared status is accepted; no transition order is enforced.
    activity = await storage.update_activity_status(activity_id, payload.status)
    if activity is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ACTIVITY_NOT_FOUND)
    return activity
