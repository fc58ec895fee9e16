"""
PetCarePlus Backend: Request Logging Middleware
=================================================

What:  One access-log line per HTTP request on the `petcareplus.access`
       logger.
How:   Times the downstream call and logs method, path, status, duration,
       request ID, client IP and the principal's email (or "-").
When:  Inside RequestIDMiddleware (so the ID is set) and around the session
       and principal middleware (the principal is read after the response).

Log level follows the status class:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

Request bodies are never logged: login bodies carry passwords and owner
bodies carry contact details.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from petcareplus.middleware.request_id import request_id_var

logger = logging.getLogger("petcareplus.access")


def _level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration for every request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        principal = getattr(request.state, "principal", None)
        who = principal.email if principal is not None else "-"
        status = response.status_code

        logger.log(
            _level_for_status(status),
            "%s %s %d %.1fms [%s] %s from %s",
            request.method,
            request.url.path,
            status,
            duration_ms,
            request_id_var.get(""),
            who,
            client_ip,
            extra={
                "request_id": request_id_var.get(""),
                "method": request.method,
                "path": request.url.path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "principal": who,
            },
        )
        return response
