"""Models package."""

from models.base import CamelModel, partial_model
from models.enums import (
    ActivityStatus,
    ActivityType,
    Department,
    EmploymentType,
    LeaveStatus,
    LeaveType,
    TaskPriority,
)

__all__ = [
    "CamelModel",
    "partial_model",
    "ActivityStatus",
    "ActivityType",
    "Department",
    "EmploymentType",
    "LeaveStatus",
    "LeaveType",
    "TaskPriority",
]
