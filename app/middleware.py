"""Request logging middleware."""

import logging
import time
from collections.abc import Awaitable, Callable

from fastapi import Request, Response

logger = logging.getLogger("app.access")

MAX_LOG_LINE = 80


async def log_api_requests(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Log method, path, status and duration for ``/api`` requests."""
    start = time.perf_counter()
    response = await call_next(request)
    path = request.url.path
    if path.startswith("/api"):
        duration_ms = (time.perf_counter() - start) * 1000
        line = f"{request.method} {path} {response.status_code} in {duration_ms:.0f}ms"
        if len(line) > MAX_LOG_LINE:
            line = line[: MAX_LOG_LINE - 1] + "…"
        logger.info(line)
    return response
