"""
PetCarePlus Backend: Owner Routes
===================================

What:  CRUD endpoints for /api/owners.
Guards:
    GET                  → require_login
    POST / PUT / DELETE  → require_role("admin")

Path ids are taken as strings and coerced by the service, so a non-integer
id is the API's own 400 ("Invalid owner_id").
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from petcareplus.auth import require_admin, require_login
from petcareplus.database import get_db_session
from petcareplus.schemas.common import ErrorResponse, MessageResponse
from petcareplus.schemas.owner import (
    OwnerCreate,
    OwnerCreatedResponse,
    OwnerResponse,
    OwnerUpdate,
)
from petcareplus.services.owner_service import owner_service

router = APIRouter(prefix="/api/owners", tags=["Owners"])

ERRORS = {
    400: {"description": "Validation error", "model": ErrorResponse},
    401: {"description": "Not logged in", "model": ErrorResponse},
    403: {"description": "Admin role required", "model": ErrorResponse},
    404: {"description": "Owner not found", "model": ErrorResponse},
    500: {"description": "Database error", "model": ErrorResponse},
}


@router.get(
    "",
    response_model=List[OwnerResponse],
    responses=ERRORS,
    dependencies=[Depends(require_login)],
    summary="List all owners",
)
async def list_owners(db: AsyncSession = Depends(get_db_session)) -> List[OwnerResponse]:
    return await owner_service.list_all(db)


@router.get(
    "/{owner_id}",
    response_model=OwnerResponse,
    responses=ERRORS,
    dependencies=[Depends(require_login)],
    summary="Get one owner",
)
async def get_owner(owner_id: str, db: AsyncSession = Depends(get_db_session)) -> OwnerResponse:
    return await owner_service.get(db, owner_id)


@router.post(
    "",
    status_code=201,
    response_model=OwnerCreatedResponse,
    responses=ERRORS,
    dependencies=[Depends(require_admin)],
    summary="Create an owner (admin)",
)
async def create_owner(
    payload: Optional[OwnerCreate] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> OwnerCreatedResponse:
    owner_id = await owner_service.create(db, payload or OwnerCreate())
    return OwnerCreatedResponse(message="Owner created", owner_id=owner_id)


@router.put(
    "/{owner_id}",
    response_model=MessageResponse,
    responses=ERRORS,
    dependencies=[Depends(require_admin)],
    summary="Update an owner (admin)",
)
async def update_owner(
    owner_id: str,
    payload: Optional[OwnerUpdate] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await owner_service.update(db, owner_id, payload or OwnerUpdate())
    return MessageResponse(message="Owner updated")


@router.delete(
    "/{owner_id}",
    response_model=MessageResponse,
    responses=ERRORS,
    dependencies=[Depends(require_admin)],
    summary="Delete an owner (admin)",
)
async def delete_owner(owner_id: str, db: AsyncSession = Depends(get_db_session)) -> MessageResponse:
    await owner_service.delete(db, owner_id)
    return MessageResponse(message="Owner deleted")
