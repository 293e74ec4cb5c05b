"""Pydantic schemas for performance reviews."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import StrictInt

from models.base import CamelModel, partial_model


class PerformanceCreate(CamelModel):
    employee_id: StrictInt
    reviewer_id: StrictInt
    period: str
    rating: Decimal | None = None
    comments: str | None = None
    goals: str | None = None
    review_date: date


PerformanceUpdate = partial_model(PerformanceCreate)


class Performance(PerformanceCreate):
    """Stored performance review."""

    id: int
    created_at: datetime
    updated_at: datetime
