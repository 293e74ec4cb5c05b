"""User account endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from config.storage import get_storage
from repositories.storage import MemStorage
from schemas.common import ErrorResponse
from schemas.employee import Employee
from schemas.task import Task
from schemas.user import User, UserCreate, UserUpdate

router = APIRouter()

USER_NOT_FOUND = "User not found"


@router.get("/users", response_model=list[User], summary="List users")
async def list_users(
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> list[User]:
    return await storage.get_all_users()


@router.get(
    "/users/{user_id}",
    response_model=User,
    responses={404: {"model": ErrorResponse}},
)
async def get_user(
    user_id: int,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> User:
    user = await storage.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return user


@router.post(
    "/users",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_user(
    payload: UserCreate,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> User:
    """Create a user account.

    ``role`` is free text, so any string is accepted.
    """
    return await storage.create_user(payload)


@router.put(
    "/users/{user_id}",
    response_model=User,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_user(
    user_id: int,
    storage: Annotated[MemStorage, Depends(get_storage)],
    payload: UserUpdate = UserUpdate(),
) -> User:
    """Merge the supplied fields onto an existing user.

    A missing body is an empty update and only confirms the user exists.
    """
    user = await storage.update_user(user_id, payload)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return user


@router.get(
    "/users/{user_id}/employee",
    response_model=Employee,
    summary="Employee record owned by a user",
    responses={404: {"model": ErrorResponse}},
)
async def get_user_employee(
    user_id: int,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> Employee:
    employee = await storage.get_employee_by_user_id(user_id)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return employee


@router.get("/users/{user_id}/tasks", response_model=list[Task])
async def list_user_tasks(
    user_id: int,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> list[Task]:
    return await storage.get_tasks_by_user_id(user_id)
