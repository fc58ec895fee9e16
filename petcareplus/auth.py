"""
PetCarePlus Backend: Authorization Gate
=========================================

What:  Role hierarchy, the request principal, and the two route guards
       (`require_login`, `require_role`).
How:   PrincipalMiddleware copies the session's user into
       `request.state.principal` once per request; the guards are FastAPI
       dependencies that read it and raise AuthenticationError (401) or
       AuthorizationError (403).
Who:   Every route except login/logout declares one of the guards.

Role levels:
    guest (0) < user (1) < admin (2)

    An unknown role string, on the principal or as a route's minimum,
    resolves to the `user` level. A corrupt role therefore behaves like a
    normal user: it can read, but cannot pass an admin gate.
"""

import logging
from typing import Any, Callable, Coroutine, Dict, Optional

from fastapi import Depends, Request
from pydantic import BaseModel, ValidationError as PydanticValidationError

from petcareplus.exceptions import AuthenticationError, AuthorizationError

logger = logging.getLogger(__name__)

ROLE_LEVEL: Dict[str, int] = {
    "guest": 0,
    "user": 1,
    "admin": 2,
}

DEFAULT_ROLE = "user"

# Session key holding the principal dict
SESSION_USER_KEY = "user"


def role_level(role: Optional[str]) -> int:
    """Numeric level of a role; unknown or missing roles count as `user`."""
    return ROLE_LEVEL.get(role, ROLE_LEVEL[DEFAULT_ROLE])


def has_role(role: Optional[str], min_role: str) -> bool:
    """True iff `role` ranks at or above `min_role`."""
    return role_level(role) >= role_level(min_role)


class Principal(BaseModel):
    """The authenticated identity attached to a session."""

    id: int
    email: str
    role: Optional[str] = DEFAULT_ROLE

    @classmethod
    def from_session(cls, data: Any) -> Optional["Principal"]:
        """
        Rebuild the principal from session data written at login.

        Returns None when the session carries no user, or carries something
        that does not parse (treated exactly like being logged out).
        """
        if not isinstance(data, dict):
            return None
        try:
            return cls.model_validate(data)
        except PydanticValidationError:
            logger.warning("Discarding malformed session principal")
            return None

    def to_session(self) -> Dict[str, Any]:
        return self.model_dump()


def get_principal(request: Request) -> Optional[Principal]:
    """Dependency: the principal resolved by PrincipalMiddleware, if any."""
    return getattr(request.state, "principal", None)


async def require_login(
    principal: Optional[Principal] = Depends(get_principal),
) -> Principal:
    """Guard: any logged-in principal passes; otherwise 401."""
    if principal is None:
        raise AuthenticationError()
    return principal


def require_role(min_role: str) -> Callable[..., Coroutine[Any, Any, Principal]]:
    """
    Build a guard that admits principals whose role level is at least
    `min_role`'s.

    Usage:
        @router.post("/owners", dependencies=[Depends(require_role("admin"))])

    Raises (from the returned dependency):
        AuthenticationError: no principal on the request (401)
        AuthorizationError:  principal's role ranks below `min_role` (403)
    """

    async def role_guard(
        principal: Optional[Principal] = Depends(get_principal),
    ) -> Principal:
        if principal is None:
            raise AuthenticationError()
        if not has_role(principal.role, min_role):
            raise AuthorizationError(
                context={"email": principal.email, "role": principal.role, "required": min_role}
            )
        return principal

    return role_guard


require_admin = require_role("admin")
