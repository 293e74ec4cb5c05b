"""Pydantic schemas for dashboard activities."""

from datetime import datetime

from pydantic import Field, StrictInt

from models.base import CamelModel
from models.enums import ActivityStatus, ActivityType


class ActivityCreate(CamelModel):
    employee_id: StrictInt
    type: ActivityType
    description: str
    status: ActivityStatus = ActivityStatus.PENDING


class ActivityStatusUpdate(CamelModel):
    status: ActivityStatus


class Activity(ActivityCreate):
    """Stored activity. ``date`` is set by the server and never changes."""

    id: int
    date: datetime = Field(description="When the activity was recorded")
