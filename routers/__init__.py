"""API router aggregation."""

from fastapi import APIRouter

from routers.activities import router as activities_router
from routers.announcements import router as announcements_router
from routers.attendance import router as attendance_router
from routers.documents import router as documents_router
from routers.employees import router as employees_router
from routers.events import router as events_router
from routers.leaves import router as leaves_router
from routers.payroll import router as payroll_router
from routers.performance import router as performance_router
from routers.tasks import router as tasks_router
from routers.users import router as users_router

# Create API router
router = APIRouter()

# Include sub-routers
router.include_router(users_router, tags=["Users"])
router.include_router(employees_router, tags=["Employees"])
router.include_router(documents_router, tags=["Documents"])
router.include_router(attendance_router, tags=["Attendance"])
router.include_router(leaves_router, tags=["Leaves"])
router.include_router(payroll_router, tags=["Payroll"])
router.include_router(performance_router, tags=["Performance"])
router.include_router(activities_router, tags=["Activities"])
router.include_router(tasks_router, tags=["Tasks"])
router.include_router(announcements_router, tags=["Announcements"])
router.include_router(events_router, tags=["Events"])
