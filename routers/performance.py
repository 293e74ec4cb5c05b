"""Performance review endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from config.storage import get_storage
from repositories.storage import MemStorage
from schemas.common import ErrorResponse
from schemas.performance import Performance, PerformanceCreate, PerformanceUpdate

router = APIRouter()

PERFORMANCE_NOT_FOUND = "Performance record not found"


@router.get(
    "/performance/{performance_id}",
    response_model=Performance,
    responses={404: {"model": ErrorResponse}},
)
async def get_performance(
    performance_id: int,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> Performance:
    review = await storage.get_performance(performance_id)
    if review is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PERFORMANCE_NOT_FOUND)
    return review


@router.post(
    "/performance",
    response_model=Performance,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_performance(
    payload: PerformanceCreate,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> Performance:
    return await storage.create_performance(payload)


@router.put(
    "/performance/{performance_id}",
    response_model=Performance,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_performance(
    performance_id: int,
    storage: Annotated[MemStorage, Depends(get_storage)],
    payload: PerformanceUpdate = PerformanceUpdate(),
) -> Performance:
    review = await storage.update_performance(performance_id, payload)
    if review is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PERFORMANCE_NOT_FOUND)
    return review
