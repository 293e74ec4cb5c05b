"""Pydantic schemas for user accounts."""

from datetime import datetime

from pydantic import Field

from models.base import CamelModel, partial_model


class UserCreate(CamelModel):
    """Insertable user fields.

    ``role`` is free text rather than an enum; the dashboard uses values such
    as "admin", "hr" and "employee" by convention only.
    """

    username: str = Field(description="Unique login name")
    password: str
    email: str = Field(description="Unique email address")
    first_name: str
    last_name: str
    role: str = Field(default="employee", description="Free-text role label")


UserUpdate = partial_model(UserCreate)


class User(UserCreate):
    """Stored user record."""

    id: int
    created_at: datetime
    updated_at: datetime
