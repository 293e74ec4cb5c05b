"""Payroll endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from config.storage import get_storage
from repositories.storage import MemStorage
from schemas.common import ErrorResponse
from schemas.payroll import Payroll, PayrollCreate, PayrollUpdate

router = APIRouter()

PAYROLL_NOT_FOUND = "Payroll record not found"


@router.get("/payroll", response_model=list[Payroll])
async def list_payroll(
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> list[Payroll]:
    return await storage.get_all_payrolls()


@router.get(
    "/payroll/{payroll_id}",
    response_model=Payroll,
    responses={404: {"model": ErrorResponse}},
)
async def get_payroll(
    payroll_id: int,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> Payroll:
    payroll = await storage.get_payroll(payroll_id)
    if payroll is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PAYROLL_NOT_FOUND)
    return payroll


@router.post(
    "/payroll",
    response_model=Payroll,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_payroll(
    payload: PayrollCreate,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> Payroll:
    return await storage.create_payroll(payload)


@router.put(
    "/payroll/{payroll_id}",
    response_model=Payroll,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_payroll(
    payroll_id: int,
    storage: Annotated[MemStorage, Depends(get_storage)],
    payload: PayrollUpdate = PayrollUpdate(),
) -> Payroll:
    payroll = await storage.update_payroll(payroll_id, payload)
    if payroll is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PAYROLL_NOT_FOUND)
    return payroll
