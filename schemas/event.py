"""Pydantic schemas for company events."""

from datetime import datetime

from pydantic import Field, StrictInt

from models.base import CamelModel


class EventCreate(CamelModel):
    """Insertable event fields."""

    title: str
    description: str | None = None
    start_date: datetime = Field(
        description="Start time; values without an offset use the configured timezone",
    )
    end_date: datetime
    location: str | None = None
    created_by: StrictInt


class Event(EventCreate):
    id: int
    created_at: datetime
