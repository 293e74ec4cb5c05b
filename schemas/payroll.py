"""Pydantic schemas for payroll records."""

from datetime import date
from decimal import Decimal

from pydantic import Field, StrictInt

from models.base import CamelModel, partial_model


class PayrollCreate(CamelModel):
    """One pay-cycle entry for an employee.

    Monetary amounts accept numbers or numeric strings and are returned as
    strings to keep their exact decimal value.
    """

    employee_id: StrictInt
    period: str = Field(description="Pay period label, e.g. 2024-05")
    base_salary: Decimal
    bonus: Decimal = Decimal("0")
    deductions: Decimal = Decimal("0")
    net_salary: Decimal
    payment_date: date
    status: str = "pending"
    notes: str | None = None


PayrollUpdate = partial_model(PayrollCreate)


class Payroll(PayrollCreate):
    id: int
