"""Announcement endpoints. Announcements are create-only."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from config.storage import get_storage
from repositories.storage import MemStorage
from schemas.announcement import Announcement, AnnouncementCreate
from schemas.common import ErrorResponse

router = APIRouter()

DEFAULT_RECENT_LIMIT = 5


@router.get("/announcements", response_model=list[Announcement])
async def list_announcements(
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> list[Announcement]:
    return await storage.get_all_announcements()


@router.get("/announcements/recent", response_model=list[Announcement])
async def list_recent_announcements(
    storage: Annotated[MemStorage, Depends(get_storage)],
    limit: Annotated[int, Query(ge=0)] = DEFAULT_RECENT_LIMIT,
) -> list[Announcement]:
    return await storage.get_recent_announcements(limit)


@router.get(
    "/announcements/{announcement_id}",
    response_model=Announcement,
    responses={404: {"model": ErrorResponse}},
)
async def get_announcement(
    announcement_id: int,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> Announcement:
    announcement = await storage.get_announcement(announcement_id)
    if announcement is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Announcement not found")
    return announcement


@router.post(
    "/announcements",
    response_model=Announcement,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_announcement(
    payload: AnnouncementCreate,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> Announcement:
    return await storage.create_announcement(payload)
