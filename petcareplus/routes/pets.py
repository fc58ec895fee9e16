"""
PetCarePlus Backend: Pet Routes
=================================

CRUD endpoints for /api/pets: reads need a session, writes need admin.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from petcareplus.auth import require_admin, require_login
from petcareplus.database import get_db_session
from petcareplus.schemas.common import ErrorResponse, MessageResponse
from petcareplus.schemas.pet import PetCreate, PetCreatedResponse, PetResponse, PetUpdate
from petcareplus.services.pet_service import pet_service

router = APIRouter(prefix="/api/pets", tags=["Pets"])

ERRORS = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get("", response_model=List[PetResponse], responses=ERRORS,
            dependencies=[Depends(require_login)])
async def list_pets(db: AsyncSession = Depends(get_db_session)) -> List[PetResponse]:
    return await pet_service.list_all(db)


@router.get("/{pet_id}", response_model=PetResponse, responses=ERRORS,
            dependencies=[Depends(require_login)])
async def get_pet(pet_id: str, db: AsyncSession = Depends(get_db_session)) -> PetResponse:
    return await pet_service.get(db, pet_id)


@router.post("", status_code=201, response_model=PetCreatedResponse, responses=ERRORS,
             dependencies=[Depends(require_admin)])
async def create_pet(
    payload: Optional[PetCreate] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> PetCreatedResponse:
    pet_id = await pet_service.create(db, payload or PetCreate())
    return PetCreatedResponse(message="Pet created", pet_id=pet_id)


@router.put("/{pet_id}", response_model=MessageResponse, responses=ERRORS,
            dependencies=[Depends(require_admin)])
async def update_pet(
    pet_id: str,
    payload: Optional[PetUpdate] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await pet_service.update(db, pet_id, payload or PetUpdate())
    return MessageResponse(message="Pet updated")


@router.delete("/{pet_id}", response_model=MessageResponse, responses=ERRORS,
               dependencies=[Depends(require_admin)])
async def delete_pet(pet_id: str, db: AsyncSession = Depends(get_db_session)) -> MessageResponse:
    await pet_service.delete(db, pet_id)
    return MessageResponse(message="Pet deleted")
