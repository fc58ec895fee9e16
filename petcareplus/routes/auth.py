"""
PetCarePlus Backend: Login / Logout Routes
============================================

What:  POST /api/login and POST /api/logout.
How:   Login delegates the credential and role checks to AuthService and
       stores the resulting principal in the signed session cookie. Logout
       clears the session. Neither route requires an existing session.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from petcareplus.auth import SESSION_USER_KEY
from petcareplus.database import get_db_session
from petcareplus.schemas.auth import LoginRequest, LoginResponse
from petcareplus.schemas.common import ErrorResponse, MessageResponse
from petcareplus.services.auth_service import auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"description": "Missing fields or malformed email", "model": ErrorResponse},
        401: {"description": "Invalid email or password", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Log in and start a session",
)
async def login(
    request: Request,
    payload: Optional[LoginRequest] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> LoginResponse:
    principal = await auth_service.login(db, payload or LoginRequest())
    request.session[SESSION_USER_KEY] = principal.to_session()
    return LoginResponse(message="Logged in successfully", role=principal.role)


@router.post("/logout", response_model=MessageResponse, summary="End the current session")
async def logout(request: Request) -> MessageResponse:
    principal = getattr(request.state, "principal", None)
    request.session.clear()
    if principal is not None:
        logger.info("User %s logged out", principal.email)
    return MessageResponse(message="Logged out")
