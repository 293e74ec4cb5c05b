"""Personal task endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from config.storage import get_storage
from repositories.storage import MemStorage
from schemas.common import ErrorResponse
from schemas.task import Task, TaskCreate, TaskUpdate

router = APIRouter()

TASK_NOT_FOUND = "Task not found"


@router.get(
    "/tasks/{task_id}",
    response_model=Task,
    responses={404: {"model": ErrorResponse}},
)
async def get_task(
    task_id: int,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> Task:
    task = await storage.get_task(task_id)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TASK_NOT_FOUND)
    return task


@router.post(
    "/tasks",
    response_model=Task,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_task(
    payload: TaskCreate,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> Task:
    return await storage.create_task(payload)


@router.put(
    "/tasks/{task_id}",
    response_model=Task,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_task(
    task_id: int,
    storage: Annotated[MemStorage, Depends(get_storage)],
    payload: TaskUpdate = TaskUpdate(),
) -> Task:
    task = await storage.update_task(task_id, payload)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TASK_NOT_FOUND)
    return task


@router.put(
    "/tasks/{task_id}/toggle",
    response_model=Task,
    summary="Flip a task's completion flag",
    responses={404: {"model": ErrorResponse}},
)
async def toggle_task(
    task_id: int,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> Task:
    """Toggle ``completed``. The request body, if any, is ignored."""
    task = await storage.toggle_task_completion(task_id)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TASK_NOT_FOUND)
    return task
