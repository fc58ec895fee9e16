"""
PetCarePlus Backend: Unhandled Error Middleware
=================================================

What:  Turns any exception that escapes a route into the API's generic
       500 `{"error": "Internal server error"}` response.
How:   Wraps the downstream call; application exceptions and HTTP errors
       never reach it because FastAPI's registered handlers answer those
       first.
When:  Innermost application middleware. The 500 therefore still passes
       back through CORS, access logging and the request ID middleware,
       and carries their headers and log line.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from petcareplus.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Stack trace to the log, generic message to the client."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            logger.error(
                "[%s] Unhandled error on %s %s: %s",
                request_id_var.get(""),
                request.method,
                request.url.path,
                str(e),
                exc_info=True,
            )
            return JSONResponse(status_code=500, content={"error": "Internal server error"})
