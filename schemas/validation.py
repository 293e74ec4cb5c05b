"""Payload validation against entity contracts."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Location prefixes added by FastAPI request parsing
REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}


class PayloadValidationError(ValueError):
    """Raised when a payload violates its contract.

    The message summarizes every violation, not just the first.
    """

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


def _format_location(loc: Iterable[Any]) -> str:
    parts = [str(part) for part in loc]
    # A bare request location ("body") is kept so the message still names it
    if len(parts) > 1 and parts[0] in REQUEST_LOCATIONS:
        parts = parts[1:]
    return ".".join(parts)


def format_validation_errors(errors: Iterable[Mapping[str, Any]]) -> str:
    """Render pydantic error entries as one field-attributed message.

    Example: ``Validation error: Field required at "firstName"; Input should
    be a valid integer at "userId"``
    """
    details = []
    for error in errors:
        message = error.get("msg", "Invalid value")
        location = _format_location(error.get("loc", ()))
        details.append(f'{message} at "{location}"' if location else message)
    return "Validation error: " + "; ".join(details)


def validate_payload(contract: type[ModelT], data: Any) -> ModelT:
    """Validate raw input against a contract.

    Args:
        contract: The insertable or partial-update model.
        data: Decoded JSON input.

    Returns:
        The validated and coerced model instance.

    Raises:
        PayloadValidationError: If any field is missing, mistyped or holds an
            undeclared enum value.
    """
    try:
        return contract.model_validate(data)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        message = format_validation_errors(errors)
        logger.debug("%s rejected: %s", contract.__name__, message)
        raise PayloadValidationError(message, errors) from e
