"""Exception handlers translating errors into ``{"message": ...}`` responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from schemas.validation import PayloadValidationError, format_validation_errors

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report body, query and path violations as a single 400 message."""
    message = format_validation_errors(exc.errors())
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return _error_response(status.HTTP_400_BAD_REQUEST, message)


async def payload_validation_handler(request: Request, exc: PayloadValidationError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return _error_response(status.HTTP_400_BAD_REQUEST, exc.message)


def _status_code_for(exc: Exception) -> int:
    code = getattr(exc, "status_code", None) or getattr(exc, "status", None)
    if isinstance(code, int) and 400 <= code <= 599:
        return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all responder using the error's own status code when it has one."""
    logger.exception("Unhandled error during %s %s", request.method, request.url.path)
    return _error_response(_status_code_for(exc), str(exc) or "Internal Server Error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(PayloadValidationError, payload_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
