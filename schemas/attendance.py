"""Pydantic schemas for attendance records."""

import datetime as dt

from pydantic import StrictInt

from models.base import CamelModel, partial_model


class AttendanceCreate(CamelModel):
    """One check-in record for an employee on a calendar date."""

    employee_id: StrictInt
    date: dt.date
    check_in: dt.datetime | None = None
    check_out: dt.datetime | None = None
    status: str = "present"
    notes: str | None = None


AttendanceUpdate = partial_model(AttendanceCreate)


class Attendance(AttendanceCreate):
    id: int
