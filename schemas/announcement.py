"""Pydantic schemas for announcements."""

from datetime import datetime

from pydantic import StrictInt

from models.base import CamelModel


class AnnouncementCreate(CamelModel):
    created_by: StrictInt
    title: str
    content: str


class Announcement(AnnouncementCreate):
    """Stored announcement. Announcements cannot be edited after posting."""

    id: int
    post_date: datetime
