"""Request logging middleware — one access line per request."""


import logging
import time
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("app.access")

class RequestLogMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration of every request.

    Query strings are left out of the line; they can carry coordinates and
    search text.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.monotonic()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = round((time.monotonic() - start) * 1000)
            logger.exception(
                "%s %s → unhandled error (%dms)", request.method, request.url.path, duration_ms
            )
            raise
        duration_ms = round((time.monotonic() - start) * 1000)

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "%s %s → %d (%dms)",
            request.method, request.url.path, response.status_code, duration_ms,
        )
        return response
