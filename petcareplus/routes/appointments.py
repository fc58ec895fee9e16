"""
PetCarePlus Backend: Appointment Routes
=========================================

CRUD endpoints for /api/appointments. Reads need a session, writes need
admin. Dates are returned as "YYYY-MM-DD" and times as "HH:MM:SS".
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from petcareplus.auth import require_admin, require_login
from petcareplus.database import get_db_session
from petcareplus.schemas.appointment import (
    AppointmentCreate,
    AppointmentCreatedResponse,
    AppointmentResponse,
    AppointmentUpdate,
)
from petcareplus.schemas.common import ErrorResponse, MessageResponse
from petcareplus.services.appointment_service import appointment_service

router = APIRouter(prefix="/api/appointments", tags=["Appointments"])

ERRORS = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get("", response_model=List[AppointmentResponse], responses=ERRORS,
            dependencies=[Depends(require_login)])
async def list_appointments(db: AsyncSession = Depends(get_db_session)) -> List[AppointmentResponse]:
    return await appointment_service.list_all(db)


@router.get("/{appointment_id}", response_model=AppointmentResponse, responses=ERRORS,
            dependencies=[Depends(require_login)])
async def get_appointment(
    appointment_id: str, db: AsyncSession = Depends(get_db_session)
) -> AppointmentResponse:
    return await appointment_service.get(db, appointment_id)


@router.post("", status_code=201, response_model=AppointmentCreatedResponse, responses=ERRORS,
             dependencies=[Depends(require_admin)])
async def create_appointment(
    payload: Optional[AppointmentCreate] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> AppointmentCreatedResponse:
    appointment_id = await appointment_service.create(db, payload or AppointmentCreate())
    return AppointmentCreatedResponse(message="Appointment created", appointment_id=appointment_id)


@router.put("/{appointment_id}", response_model=MessageResponse, responses=ERRORS,
            dependencies=[Depends(require_admin)])
async def update_appointment(
    appointment_id: str,
    payload: Optional[AppointmentUpdate] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await appointment_service.update(db, appointment_id, payload or AppointmentUpdate())
    return MessageResponse(message="Appointment updated")


@router.delete("/{appointment_id}", response_model=MessageResponse, responses=ERRORS,
               dependencies=[Depends(require_admin)])
async def delete_appointment(
    appointment_id: str, db: AsyncSession = Depends(get_db_session)
) -> MessageResponse:
    await appointment_service.delete(db, appointment_id)
    return MessageResponse(message="Appointment deleted")
