"""Leave request endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from config.storage import get_storage
from repositories.storage import MemStorage
from schemas.common import ErrorResponse
from schemas.leave import Leave, LeaveCreate, LeaveStatusUpdate

logger = logging.getLogger(__name__)

router = APIRouter()

LEAVE_NOT_FOUND = "Leave request not found"


@router.get("/leaves", response_model=list[Leave])
async def list_leaves(
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> list[Leave]:
    return await storage.get_all_leaves()


@router.get(
    "/leaves/{leave_id}",
    response_model=Leave,
    responses={404: {"model": ErrorResponse}},
)
async def get_leave(
    leave_id: int,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> Leave:
    leave = await storage.get_leave(leave_id)
    if leave is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=LEAVE_NOT_FOUND)
    return leave


@router.post(
    "/leaves",
    response_model=Leave,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_leave(
    payload: LeaveCreate,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> Leave:
    return await storage.create_leave(payload)


@router.put(
    "/leaves/{leave_id}/status",
    response_model=Leave,
    summary="Approve, reject or reopen a leave request",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_leave_status(
    leave_id: int,
    payload: LeaveStatusUpdate,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> Leave:
    """Set the status of a leave request.

    Args:
        leave_id: The leave request's ID.
        payload: New status and, optionally, the deciding user's ID.
        storage: Application storage (injected).

    Returns:
        The updated leave request.
    """
    leave = await storage.update_leave_status(leave_id, payload.status, payload.approved_by)
    if leave is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=LEAVE_NOT_FOUND)
    logger.info(
        "Leave request status changed: id=%s, status=%s, approved_by=%s",
        leave.id,
        leave.status.value,
        leave.approved_by,
    )
    return leave
