"""Pydantic schemas for employee records."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import Field, StrictInt

from models.base import CamelModel, partial_model
from models.enums import Department, EmploymentType


class EmployeeCreate(CamelModel):
    """Insertable employee fields."""

    user_id: StrictInt = Field(description="ID of the owning user account")
    employee_id: str = Field(description="Unique business code, e.g. EMP-100")
    date_of_birth: date | None = None
    hire_date: date
    department: Department
    position: str
    employment_type: EmploymentType
    manager: StrictInt | None = Field(
        default=None,
        description="ID of the managing employee",
    )
    phone: str | None = None
    address: str | None = None
    emergency_contact: str | None = None
    salary: Decimal | None = None


EmployeeUpdate = partial_model(EmployeeCreate)


class Employee(EmployeeCreate):
    """Stored employee record."""

    id: int
    created_at: datetime
    updated_at: datetime
