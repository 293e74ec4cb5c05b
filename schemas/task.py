"""Pydantic schemas for personal tasks."""

from datetime import date, datetime

from pydantic import StrictBool, StrictInt

from models.base import CamelModel, partial_model
from models.enums import TaskPriority


class TaskCreate(CamelModel):
    user_id: StrictInt
    title: str
    description: str | None = None
    due_date: date | None = None
    priority: TaskPriority = TaskPriority.NORMAL
    completed: StrictBool = False


TaskUpdate = partial_model(TaskCreate)


class Task(TaskCreate):
    id: int
    created_at: datetime
    updated_at: datetime
