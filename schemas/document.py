"""Pydantic schemas for employee documents."""

from datetime import datetime

from pydantic import Field, StrictInt

from models.base import CamelModel


class DocumentCreate(CamelModel):
    employee_id: StrictInt
    name: str
    type: str
    path: str
    metadata: str | None = Field(
        default=None,
        description="Opaque document information, typically a JSON string",
    )


class Document(DocumentCreate):
    """Stored document record. Documents are immutable once uploaded."""

    id: int
    upload_date: datetime
