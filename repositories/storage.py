"""In-memory storage for all HR dashboard entities."""

import logging
from collections.abc import Callable, Iterable, Mapping
from datetime import date, datetime
from functools import partial
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from config.clock import as_aware, current_time
from config.settings import settings
from models.enums import ActivityStatus, LeaveStatus
from schemas.activity import Activity, ActivityCreate
from schemas.announcement import Announcement, AnnouncementCreate
from schemas.attendance import Attendance, AttendanceCreate, AttendanceUpdate
from schemas.document import Document, DocumentCreate
from schemas.employee import Employee, EmployeeCreate, EmployeeUpdate
from schemas.event import Event, EventCreate
from schemas.leave import Leave, LeaveCreate
from schemas.payroll import Payroll, PayrollCreate, PayrollUpdate
from schemas.performance import Performance, PerformanceCreate, PerformanceUpdate
from schemas.task import Task, TaskCreate, TaskUpdate
from schemas.user import User, UserCreate, UserUpdate
from schemas.validation import validate_payload

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

SAMPLE_USERS = [
    {
        "username": "admin",
        "password": "admin123",
        "email": "admin@company.com",
        "firstName": "Admin",
        "lastName": "User",
        "role": "admin",
    },
    {
        "username": "hrmanager",
        "password": "hr123",
        "email": "hr@company.com",
        "firstName": "HR",
        "lastName": "Manager",
        "role": "hr",
    },
]


class Table(Generic[RecordT]):
    """Records of one entity type keyed by an auto-incrementing id.

    Iteration follows insertion order; replacing a record keeps its position.
    """

    def __init__(self, name: str):
        self.name = name
        self._rows: dict[int, RecordT] = {}
        self._next_id = 1

    def allocate_id(self) -> int:
        record_id = self._next_id
        self._next_id += 1
        return record_id

    def get(self, record_id: int) -> RecordT | None:
        return self._rows.get(record_id)

    def put(self, record_id: int, record: RecordT) -> RecordT:
        self._rows[record_id] = record
        return record

    def delete(self, record_id: int) -> bool:
        return self._rows.pop(record_id, None) is not None

    def all(self) -> list[RecordT]:
        return list(self._rows.values())

    def where(self, predicate: Callable[[RecordT], bool]) -> list[RecordT]:
        return [record for record in self._rows.values() if predicate(record)]

    def first(self, predicate: Callable[[RecordT], bool]) -> RecordT | None:
        return next((record for record in self._rows.values() if predicate(record)), None)

    def __len__(self) -> int:
        return len(self._rows)


def apply_partial(record: RecordT, partial: BaseModel | Mapping[str, Any], **stamps: Any) -> RecordT:
    """Merge the fields present in ``partial`` over ``record``.

    Fields absent from the partial keep their prior values; ``stamps`` are
    applied last (e.g. ``updated_at``).
    """
    if isinstance(partial, BaseModel):
        changes = partial.model_dump(exclude_unset=True)
    else:
        changes = dict(partial)
    changes.update(stamps)
    return record.model_copy(update=changes)


def _newest_first(records: Iterable[RecordT], key: Callable[[RecordT], datetime], limit: int) -> list[RecordT]:
    return sorted(records, key=key, reverse=True)[: max(limit, 0)]


class MemStorage:
    """In-memory repository holding all application state.

    Every operation is ``async`` to keep the storage contract independent of
    the backing structure. Lookups of missing ids return ``None`` (or
    ``False`` for deletes) and never raise.
    """

    def __init__(
        self,
        clock: Callable[[], datetime] | None = None,
        timezone: str | None = None,
    ):
        """Initialize empty tables.

        Args:
            clock: Source of the current time for server-set timestamps and
                the upcoming-events filter. Defaults to the wall clock in
                ``timezone``.
            timezone: Zone for reading naive client datetimes. Defaults to
                ``settings.timezone``.
        """
        self._timezone = timezone or settings.timezone
        self._clock = clock or partial(current_time, self._timezone)
        self.users: Table[User] = Table("users")
        self.employees: Table[Employee] = Table("employees")
        self.documents: Table[Document] = Table("documents")
        self.attendances: Table[Attendance] = Table("attendance")
        self.leaves: Table[Leave] = Table("leaves")
        self.payrolls: Table[Payroll] = Table("payroll")
        self.performances: Table[Performance] = Table("performance")
        self.activities: Table[Activity] = Table("activities")
        self.tasks: Table[Task] = Table("tasks")
        self.announcements: Table[Announcement] = Table("announcements")
        self.events: Table[Event] = Table("events")

    def _insert(self, table: Table[RecordT], record_type: type[RecordT], data: BaseModel, **server_fields: Any) -> RecordT:
        record_id = table.allocate_id()
        record = record_type(id=record_id, **data.model_dump(), **server_fields)
        table.put(record_id, record)
        logger.info("Created %s record: id=%s", table.name, record_id)
        return record

    def _update(self, table: Table[RecordT], record_id: int, partial: BaseModel | Mapping[str, Any], **stamps: Any) -> RecordT | None:
        existing = table.get(record_id)
        if existing is None:
            logger.debug("Update skipped, %s record not found: id=%s", table.name, record_id)
            return None
        updated = table.put(record_id, apply_partial(existing, partial, **stamps))
        logger.info("Updated %s record: id=%s", table.name, record_id)
        return updated

    def _stamped(self, table: Table[RecordT], record_type: type[RecordT], data: BaseModel) -> RecordT:
        now = self._clock()
        return self._insert(table, record_type, data, created_at=now, updated_at=now)

    async def seed_sample_data(self) -> None:
        """Create the default administrator and HR manager accounts."""
        for raw in SAMPLE_USERS:
            await self.create_user(validate_payload(UserCreate, raw))
        logger.info("Seeded %d sample users", len(SAMPLE_USERS))

    # User operations

    async def get_user(self, user_id: int) -> User | None:
        """Get a user by ID.

        Args:
            user_id: The user's ID.

        Returns:
            The User record if it exists, None otherwise.
        """
        return self.users.get(user_id)

    async def get_user_by_username(self, username: str) -> User | None:
        """Get a user by login name.

        Args:
            username: Exact username to match.

        Returns:
            The first matching User, or None.
        """
        return self.users.first(lambda user: user.username == username)

    async def get_user_by_email(self, email: str) -> User | None:
        """Get a user by email address.

        Args:
            email: Exact email to match.

        Returns:
            The first matching User, or None.
        """
        return self.users.first(lambda user: user.email == email)

    async def create_user(self, data: UserCreate) -> User:
        """Create a user account.

        Args:
            data: Validated insertable user fields.

        Returns:
            The stored User with its new ID and timestamps.
        """
        return self._stamped(self.users, User, data)

    async def update_user(self, user_id: int, data: UserUpdate) -> User | None:
        """Merge supplied fields onto a user.

        Args:
            user_id: The user's ID.
            data: Partial update; only set fields are applied.

        Returns:
            The updated User, or None if it does not exist.
        """
        return self._update(self.users, user_id, data, updated_at=self._clock())

    async def get_all_users(self) -> list[User]:
        """Return every user in insertion order."""
        return self.users.all()

    # Employee operations

    async def get_employee(self, employee_id: int) -> Employee | None:
        """Get an employee record by ID.

        Args:
            employee_id: The employee record's ID.

        Returns:
            The Employee if it exists, None otherwise.
        """
        return self.employees.get(employee_id)

    async def get_employee_by_user_id(self, user_id: int) -> Employee | None:
        """Get the employee record owned by a user account.

        Args:
            user_id: The owning user's ID.

        Returns:
            The first matching Employee, or None.
        """
        return self.employees.first(lambda employee: employee.user_id == user_id)

    async def create_employee(self, data: EmployeeCreate) -> Employee:
        return self._stamped(self.employees, Employee, data)

    async def update_employee(self, employee_id: int, data: EmployeeUpdate) -> Employee | None:
        """Merge supplied fields onto an employee record.

        Args:
            employee_id: The employee record's ID.
            data: Partial update; only set fields are applied.

        Returns:
            The updated Employee, or None if it does not exist.
        """
        return self._update(self.employees, employee_id, data, updated_at=self._clock())

    async def get_all_employees(self) -> list[Employee]:
        return self.employees.all()

    # Document operations

    async def get_document(self, document_id: int) -> Document | None:
        return self.documents.get(document_id)

    async def get_documents_by_employee_id(self, employee_id: int) -> list[Document]:
        """Return an employee's documents in upload order."""
        return self.documents.where(lambda document: document.employee_id == employee_id)

    async def create_document(self, data: DocumentCreate) -> Document:
        """Store document metadata, stamping ``upload_date``."""
        return self._insert(self.documents, Document, data, upload_date=self._clock())

    async def delete_document(self, document_id: int) -> bool:
        """Remove a single document. Nothing else is deleted with it."""
        deleted = self.documents.delete(document_id)
        if deleted:
            logger.info("Deleted documents record: id=%s", document_id)
        return deleted

    # Attendance operations

    async def get_attendance(self, attendance_id: int) -> Attendance | None:
        return self.attendances.get(attendance_id)

    async def get_attendance_by_employee_id(self, employee_id: int) -> list[Attendance]:
        """Return every attendance record for an employee.

        Args:
            employee_id: The employee record's ID.

        Returns:
            Matching records in insertion order; empty if there are none.
        """
        return self.attendances.where(lambda record: record.employee_id == employee_id)

    async def get_attendance_by_date(self, day: date | datetime) -> list[Attendance]:
        """Return attendance across employees for one calendar date.

        Args:
            day: The date to match; the time of day is ignored.

        Returns:
            Matching records in insertion order.
        """
        if isinstance(day, datetime):
            day = day.date()
        return self.attendances.where(lambda record: record.date == day)

    async def get_all_attendance(self) -> list[Attendance]:
        return self.attendances.all()

    async def create_attendance(self, data: AttendanceCreate) -> Attendance:
        return self._insert(self.attendances, Attendance, data)

    async def update_attendance(self, attendance_id: int, data: AttendanceUpdate) -> Attendance | None:
        return self._update(self.attendances, attendance_id, data)

    # Leave operations

    async def get_leave(self, leave_id: int) -> Leave | None:
        return self.leaves.get(leave_id)

    async def get_leaves_by_employee_id(self, employee_id: int) -> list[Leave]:
        """Return every leave request filed for an employee.

        Args:
            employee_id: The employee record's ID.

        Returns:
            Matching leave requests in insertion order.
        """
        return self.leaves.where(lambda leave: leave.employee_id == employee_id)

    async def get_all_leaves(self) -> list[Leave]:
        return self.leaves.all()

    async def create_leave(self, data: LeaveCreate) -> Leave:
        """Create a leave request.

        Args:
            data: Validated insertable leave fields; status defaults to pending.

        Returns:
            The stored Leave with its new ID and timestamps.
        """
        return self._stamped(self.leaves, Leave, data)

    async def update_leave_status(
        self,
        leave_id: int,
        status: LeaveStatus,
        approved_by: int | None = None,
    ) -> Leave | None:
        """Set a leave request's status and approver.

        Args:
            leave_id: The leave request's ID.
            status: New status; any declared value is accepted.
            approved_by: User deciding the request. Omitting it clears any
                previously recorded approver.

        Returns:
            The updated leave request, or None if it does not exist.
        """
        changes = {"status": status, "approved_by": approved_by}
        return self._update(self.leaves, leave_id, changes, updated_at=self._clock())

    # Payroll operations

    async def get_payroll(self, payroll_id: int) -> Payroll | None:
        return self.payrolls.get(payroll_id)

    async def get_payrolls_by_employee_id(self, employee_id: int) -> list[Payroll]:
        """Return an employee's payroll entries.

        Args:
            employee_id: The employee record's ID.

        Returns:
            Matching payroll records in insertion order.
        """
        return self.payrolls.where(lambda payroll: payroll.employee_id == employee_id)

    async def get_all_payrolls(self) -> list[Payroll]:
        return self.payrolls.all()

    async def create_payroll(self, data: PayrollCreate) -> Payroll:
        return self._insert(self.payrolls, Payroll, data)

    async def update_payroll(self, payroll_id: int, data: PayrollUpdate) -> Payroll | None:
        """Merge supplied fields onto a payroll record.

        Args:
            payroll_id: The payroll record's ID.
            data: Partial update; only set fields are applied.

        Returns:
            The updated Payroll, or None if it does not exist.
        """
        return self._update(self.payrolls, payroll_id, data)

    # Performance operations

    async def get_performance(self, performance_id: int) -> Performance | None:
        return self.performances.get(performance_id)

    async def get_performances_by_employee_id(self, employee_id: int) -> list[Performance]:
        """Return the performance reviews for an employee.

        Args:
            employee_id: The reviewed employee's ID.

        Returns:
            Matching reviews in insertion order.
        """
        return self.performances.where(lambda review: review.employee_id == employee_id)

    async def create_performance(self, data: PerformanceCreate) -> Performance:
        return self._stamped(self.performances, Performance, data)

    async def update_performance(self, performance_id: int, data: PerformanceUpdate) -> Performance | None:
        return self._update(self.performances, performance_id, data, updated_at=self._clock())

    # Activity operations

    async def get_activity(self, activity_id: int) -> Activity | None:
        return self.activities.get(activity_id)

    async def get_activities_by_employee_id(self, employee_id: int) -> list[Activity]:
        """Return an employee's activities in insertion order."""
        return self.activities.where(lambda activity: activity.employee_id == employee_id)

    async def get_recent_activities(self, limit: int) -> list[Activity]:
        """Return up to ``limit`` activities, newest first."""
        return _newest_first(self.activities.all(), lambda activity: activity.date, limit)

    async def create_activity(self, data: ActivityCreate) -> Activity:
        """Record an activity, stamping its ``date``."""
        return self._insert(self.activities, Activity, data, date=self._clock())

    async def update_activity_status(self, activity_id: int, status: ActivityStatus) -> Activity | None:
        """Set an activity's status.

        Args:
            activity_id: The activity's ID.
            status: New status; the activity date is left unchanged.

        Returns:
            The updated Activity, or None if it does not exist.
        """
        return self._update(self.activities, activity_id, {"status": status})

    # Task operations

    async def get_task(self, task_id: int) -> Task | None:
        return self.tasks.get(task_id)

    async def get_tasks_by_user_id(self, user_id: int) -> list[Task]:
        """Return the tasks assigned to a user.

        Args:
            user_id: The owning user's ID.

        Returns:
            Matching tasks in insertion order.
        """
        return self.tasks.where(lambda task: task.user_id == user_id)

    async def create_task(self, data: TaskCreate) -> Task:
        return self._stamped(self.tasks, Task, data)

    async def update_task(self, task_id: int, data: TaskUpdate) -> Task | None:
        return self._update(self.tasks, task_id, data, updated_at=self._clock())

    async def toggle_task_completion(self, task_id: int) -> Task | None:
        """Flip a task's ``completed`` flag.

        Args:
            task_id: The task's ID.

        Returns:
            The updated Task, or None if it does not exist.
        """
        task = self.tasks.get(task_id)
        if task is None:
            return None
        return self._update(
            self.tasks,
            task_id,
            {"completed": not task.completed},
            updated_at=self._clock(),
        )

    # Announcement operations

    async def get_announcement(self, announcement_id: int) -> Announcement | None:
        return self.announcements.get(announcement_id)

    async def get_all_announcements(self) -> list[Announcement]:
        return self.announcements.all()

    async def get_recent_announcements(self, limit: int) -> list[Announcement]:
        """Return up to ``limit`` announcements, newest first."""
        return _newest_first(self.announcements.all(), lambda item: item.post_date, limit)

    async def create_announcement(self, data: AnnouncementCreate) -> Announcement:
        return self._insert(self.announcements, Announcement, data, post_date=self._clock())

    # Event operations

    async def get_event(self, event_id: int) -> Event | None:
        return self.events.get(event_id)

    async def get_all_events(self) -> list[Event]:
        return self.events.all()

    async def get_upcoming_events(self, limit: int) -> list[Event]:
        """Return up to ``limit`` events starting strictly after now, soonest first."""
        now = self._clock()

        def starts_at(event: Event) -> datetime:
            return as_aware(event.start_date, self._timezone)

        upcoming = sorted(self.events.where(lambda event: starts_at(event) > now), key=starts_at)
        return upcoming[: max(limit, 0)]

    async def create_event(self, data: EventCreate) -> Event:
        return self._insert(self.events, Event, data, created_at=self._clock())
