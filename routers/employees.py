"""Employee record endpoints, including per-employee collections."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from config.storage import get_storage
from repositories.storage import MemStorage
from schemas.activity import Activity
from schemas.attendance import Attendance
from schemas.common import ErrorResponse
from schemas.document import Document
from schemas.employee import Employee, EmployeeCreate, EmployeeUpdate
from schemas.leave import Leave
from schemas.payroll import Payroll
from schemas.performance import Performance

logger = logging.getLogger(__name__)

router = APIRouter()

EMPLOYEE_NOT_FOUND = "Employee not found"


@router.get("/employees", response_model=list[Employee])
async def list_employees(
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> list[Employee]:
    return await storage.get_all_employees()


@router.get(
    "/employees/{employee_id}",
    response_model=Employee,
    responses={404: {"model": ErrorResponse}},
)
async def get_employee(
    employee_id: int,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> Employee:
    employee = await storage.get_employee(employee_id)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=EMPLOYEE_NOT_FOUND)
    return employee


@router.post(
    "/employees",
    response_model=Employee,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_employee(
    payload: EmployeeCreate,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> Employee:
    """Create an employee record.

    The owning user and manager references are stored as given; they are not
    checked against existing records.
    """
    employee = await storage.create_employee(payload)
    logger.info(
        "Hired employee: id=%s, code=%s, department=%s",
        employee.id,
        employee.employee_id,
        employee.department.value,
    )
    return employee


@router.put(
    "/employees/{employee_id}",
    response_model=Employee,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_employee(
    employee_id: int,
    storage: Annotated[MemStorage, Depends(get_storage)],
    payload: EmployeeUpdate = EmployeeUpdate(),
) -> Employee:
    employee = await storage.update_employee(employee_id, payload)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=EMPLOYEE_NOT_FOUND)
    return employee


@router.get("/employees/{employee_id}/documents", response_model=list[Document])
async def list_employee_documents(
    employee_id: int,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> list[Document]:
    return await storage.get_documents_by_employee_id(employee_id)


@router.get("/employees/{employee_id}/attendance", response_model=list[Attendance])
async def list_employee_attendance(
    employee_id: int,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> list[Attendance]:
    return await storage.get_attendance_by_employee_id(employee_id)


@router.get("/employees/{employee_id}/leaves", response_model=list[Leave])
async def list_employee_leaves(
    employee_id: int,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> list[Leave]:
    return await storage.get_leaves_by_employee_id(employee_id)


@router.get("/employees/{employee_id}/payroll", response_model=list[Payroll])
async def list_employee_payroll(
    employee_id: int,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> list[Payroll]:
    return await storage.get_payrolls_by_employee_id(employee_id)


@router.get("/employees/{employee_id}/performance", response_model=list[Performance])
async def list_employee_performance(
    employee_id: int,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> list[Performance]:
    return await storage.get_performances_by_employee_id(employee_id)


@router.get("/employees/{employee_id}/activities", response_model=list[Activity])
async def list_employee_activities(
    employee_id: int,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> list[Activity]:
    return await storage.get_activities_by_employee_id(employee_id)
