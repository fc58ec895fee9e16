"""
PetCarePlus Backend: Auth Service
===================================

What:  Verifies login credentials and resolves the caller's role.
How:   Two sequential store reads: the credential match in `users`, then the
       role in `user_accounts` (defaulting to "user" when there is no row).
Who:   Called by POST /api/login; the route stores the returned Principal
       in the session.

Passwords are compared as stored in `users.password`; this service does not
own that table and never writes to it.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from petcareplus.auth import DEFAULT_ROLE, Principal
from petcareplus.exceptions import AuthenticationError, DatabaseError, ValidationError
from petcareplus.models.user import User, UserAccount
from petcareplus.schemas.auth import LoginRequest
from petcareplus.validators import validate_email

logger = logging.getLogger(__name__)


class AuthService:
    """Credential check plus role lookup."""

    async def login(self, db: AsyncSession, payload: LoginRequest) -> Principal:
        """
        Authenticate an email/password pair.

        Raises:
            ValidationError:     missing field or malformed email (400)
            AuthenticationError: no user with that email and password (401)
            DatabaseError:       either lookup failed (500)
        """
        email, password = payload.email, payload.password
        if not email or not password:
            raise ValidationError("Email and password are required")
        if not validate_email(email):
            raise ValidationError("Invalid email format", field="email")

        try:
            result = await db.execute(
                select(User.id, User.email).where(User.email == email, User.password == password)
            )
            user = result.first()
        except SQLAlchemyError as e:
            logger.error("DB error in login (users): %s", e, exc_info=True)
            raise DatabaseError(context={"table": "users"}) from e

        if user is None:
            logger.info("Failed login for %s", email)
            raise AuthenticationError("Invalid email or password")

        try:
            result = await db.execute(
                select(UserAccount.role).where(UserAccount.email == email).limit(1)
            )
            role = result.scalars().first()
        except SQLAlchemyError as e:
            logger.error("DB error in login (user_accounts): %s", e, exc_info=True)
            raise DatabaseError(context={"table": "user_accounts"}) from e

        principal = Principal(id=user.id, email=user.email, role=role or DEFAULT_ROLE)
        logger.info("User %s logged in with role %s", principal.email, principal.role)
        return principal


auth_service = AuthService()
