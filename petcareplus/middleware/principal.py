"""
PetCarePlus Backend: Principal Middleware
===========================================

What:  Resolves the logged-in principal from the session once per request
       and stores it on `request.state.principal` (None when logged out).
How:   Reads the `user` entry the login route wrote into the signed
       session cookie at login; nothing is looked up in the database.
When:  Runs inside SessionMiddleware, so `request.session` is populated.

The route guards in petcareplus.auth only ever read `request.state`; they
never touch the session directly.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from petcareplus.auth import SESSION_USER_KEY, Principal


class PrincipalMiddleware(BaseHTTPMiddleware):
    """Attaches `request.state.principal` for the guards and the access log."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        session = request.scope.get("session") or {}
        request.state.principal = Principal.from_session(session.get(SESSION_USER_KEY))
        return await call_next(request)
