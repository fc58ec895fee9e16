"""
PetCarePlus Backend: Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions, one per error class the API reports.
How:   Each exception carries a user-facing message, an HTTP status code and
       an optional context dict. Global exception handlers (registered in
       main.py) turn them into `{"error": <message>}` JSON responses.
Who:   Raised by the authorization gate and the services; caught by the
       global handlers.

Exception Hierarchy:
    PetCarePlusError (base)          → 500
    ├── ValidationError              → 400 Bad Request
    ├── AuthenticationError          → 401 Unauthorized
    ├── AuthorizationError           → 403 Forbidden
    ├── NotFoundError                → 404 Not Found
    ├── DatabaseError                → 500 Internal Server Error
    └── UpstreamError                → 502 Bad Gateway

The `context` dict is logged server-side and never returned to the client.
"""

from typing import Any, Dict, Optional


class PetCarePlusError(Exception):
    """
    Base exception for all PetCarePlus application errors.

    Attributes:
        message:      User-facing error description (returned in the response body)
        status_code:  HTTP status the global handler responds with
        context:      Additional debug info (logged, NOT returned to client)
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "Internal server error",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(PetCarePlusError):
    """
    Raised when client input fails validation.

    When:    Missing required fields, ids that are not integers, malformed
             email addresses, unsupported weather cities.
    HTTP:    400 Bad Request
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class AuthenticationError(PetCarePlusError):
    """
    Raised when a request needs a logged-in principal and has none,
    or when login credentials do not match.

    HTTP:    401 Unauthorized
    """

    status_code = 401

    def __init__(
        self,
        message: str = "Not logged in",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class AuthorizationError(PetCarePlusError):
    """
    Raised when the principal's role level is below the route's minimum.

    HTTP:    403 Forbidden
    """

    status_code = 403

    def __init__(
        self,
        message: str = "Forbidden: insufficient role",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(PetCarePlusError):
    """
    Raised when a requested row does not exist (or an update/delete
    statement matched zero rows).

    HTTP:    404 Not Found

    The message is "<Resource> not found", e.g. "Owner not found".
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(PetCarePlusError):
    """
    Raised when a database operation fails.

    When:    Connection lost, constraint violation (duplicate caller-supplied
             primary key), malformed statement.
    HTTP:    500 Internal Server Error

    The message returned to the client is always the generic
    "Database error"; driver detail only goes into `context` for the log.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "Database error",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class UpstreamError(PetCarePlusError):
    """
    Raised when the external weather provider answers without the payload
    we need.

    HTTP:    502 Bad Gateway
    """

    status_code = 502

    def __init__(
        self,
        message: str = "No current weather data returned",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
