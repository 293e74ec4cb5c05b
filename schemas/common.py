"""Schemas shared across API families."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    message: str = Field(
        description="Error message",
    )


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
