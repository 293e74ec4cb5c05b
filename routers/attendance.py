"""Attendance endpoints."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from config.storage import get_storage
from repositories.storage import MemStorage
from schemas.attendance import Attendance, AttendanceCreate, AttendanceUpdate
from schemas.common import ErrorResponse

router = APIRouter()

ATTENDANCE_NOT_FOUND = "Attendance record not found"


@router.get(
    "/attendance",
    response_model=list[Attendance],
    summary="List attendance records",
)
async def list_attendance(
    storage: Annotated[MemStorage, Depends(get_storage)],
    day: Annotated[
        date | None,
        Query(alias="date", description="Only records for this calendar date"),
    ] = None,
) -> list[Attendance]:
    if day is not None:
        return await storage.get_attendance_by_date(day)
    return await storage.get_all_attendance()


@router.get(
    "/attendance/{attendance_id}",
    response_model=Attendance,
    responses={404: {"model": ErrorResponse}},
)
async def get_attendance(
    attendance_id: int,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> Attendance:
    record = await storage.get_attendance(attendance_id)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ATTENDANCE_NOT_FOUND)
    return record


@router.post(
    "/attendance",
    response_model=Attendance,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_attendance(
    payload: AttendanceCreate,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> Attendance:
    return await storage.create_attendance(payload)


@router.put(
    "/attendance/{attendance_id}",
    response_model=Attendance,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_attendance(
    attendance_id: int,
    storage: Annotated[MemStorage, Depends(get_storage)],
    payload: AttendanceUpdate = AttendanceUpdate(),
) -> Attendance:
    """Update an attendance record, typically to add the check-out time."""
    record = await storage.update_attendance(attendance_id, payload)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ATTENDANCE_NOT_FOUND)
    return record
