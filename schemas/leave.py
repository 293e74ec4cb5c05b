"""Pydantic schemas for leave requests."""

from datetime import date, datetime

from pydantic import Field, StrictInt

from models.base import CamelModel
from models.enums import LeaveStatus, LeaveType


class LeaveCreate(CamelModel):
    """Insertable leave request fields."""

    employee_id: StrictInt
    start_date: date
    end_date: date
    type: LeaveType
    reason: str | None = None
    status: LeaveStatus = LeaveStatus.PENDING
    approved_by: StrictInt | None = Field(
        default=None,
        description="ID of the user who decided the request",
    )


class LeaveStatusUpdate(CamelModel):
    """Body of the leave status transition endpoint.

    Any declared status is accepted regardless of the current one.
    """

    status: LeaveStatus
    approved_by: StrictInt | None = None


class Leave(LeaveCreate):
    """Stored leave request."""

    id: int
    created_at: datetime
    updated_at: datetime
