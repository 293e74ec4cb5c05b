"""Schemas package."""

from schemas.activity import Activity, ActivityCreate, ActivityStatusUpdate
from schemas.announcement import Announcement, AnnouncementCreate
from schemas.attendance import Attendance, AttendanceCreate, AttendanceUpdate
from schemas.common import ErrorResponse, HealthResponse
from schemas.document import Document, DocumentCreate
from schemas.employee import Employee, EmployeeCreate, EmployeeUpdate
from schemas.event import Event, EventCreate
from schemas.leave import Leave, LeaveCreate, LeaveStatusUpdate
from schemas.payroll import Payroll, PayrollCreate, PayrollUpdate
from schemas.performance import Performance, PerformanceCreate, PerformanceUpdate
from schemas.task import Task, TaskCreate, TaskUpdate
from schemas.user import User, UserCreate, UserUpdate
from schemas.validation import (
    PayloadValidationError,
    format_validation_errors,
    validate_payload,
)

__all__ = [
    "Activity",
    "ActivityCreate",
    "ActivityStatusUpdate",
    "Announcement",
    "AnnouncementCreate",
    "Attendance",
    "AttendanceCreate",
    "AttendanceUpdate",
    "Document",
    "DocumentCreate",
    "Employee",
    "EmployeeCreate",
    "EmployeeUpdate",
    "ErrorResponse",
    "Event",
    "EventCreate",
    "HealthResponse",
    "Leave",
    "LeaveCreate",
    "LeaveStatusUpdate",
    "PayloadValidationError",
    "Payroll",
    "PayrollCreate",
    "PayrollUpdate",
    "Performance",
    "PerformanceCreate",
    "PerformanceUpdate",
    "Task",
    "TaskCreate",
    "TaskUpdate",
    "User",
    "UserCreate",
    "UserUpdate",
    "format_validation_errors",
    "validate_payload",
]
