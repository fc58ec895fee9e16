"""
PetCarePlus Backend: Appointment Service
==========================================

What:  Appointment CRUD on top of ResourceService.
How:   Validation runs in three passes, each with its own 400 message:
           1. integer keys (appointment_id on create, pet_id, vet_id)
           2. required text fields
           3. ISO date (YYYY-MM-DD) and time (HH:MM[:SS]) parsing

pet_id and vet_id are not checked against any table.
"""

from datetime import date, datetime, time
from typing import Any, Dict

from petcareplus.exceptions import ValidationError
from petcareplus.models.appointment import Appointment
from petcareplus.schemas.appointment import (
    AppointmentCreate,
    AppointmentResponse,
    AppointmentUpdate,
)
from petcareplus.services.resource_service import ResourceService
from petcareplus.validators import is_blank, to_int

REQUIRED_MESSAGE = "appointment_date, appointment_time, reason, and status are required"


def parse_date(value: str) -> date:
    """Parse "YYYY-MM-DD"; full ISO timestamps are cut down to their date."""
    value = value.strip()
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        raise ValidationError("Invalid appointment_date", field="appointment_date")


def parse_time(value: str) -> time:
    try:
        return time.fromisoformat(value.strip())
    except ValueError:
        raise ValidationError("Invalid appointment_time", field="appointment_time")


class AppointmentService(ResourceService[AppointmentResponse]):
    model = Appointment
    response_schema = AppointmentResponse
    resource_name = "Appointment"
    key_name = "appointment_id"

    @staticmethod
    def _schedule_fields(payload: AppointmentUpdate) -> Dict[str, Any]:
        if (
            is_blank(payload.appointment_date)
            or is_blank(payload.appointment_time)
            or is_blank(payload.reason)
            or is_blank(payload.status)
        ):
            raise ValidationError(REQUIRED_MESSAGE)
        return {
            "appointment_date": parse_date(payload.appointment_date),
            "appointment_time": parse_time(payload.appointment_time),
            "reason": payload.reason,
            "status": payload.status,
        }

    def validate_create(self, payload: AppointmentCreate) -> Dict[str, Any]:
        appointment_id = to_int(payload.appointment_id)
        pet_id = to_int(payload.pet_id)
        vet_id = to_int(payload.vet_id)
        if appointment_id is None or pet_id is None or vet_id is None:
            raise ValidationError("appointment_id, pet_id, and vet_id must be integers")
        return {
            "appointment_id": appointment_id,
            "pet_id": pet_id,
            "vet_id": vet_id,
            **self._schedule_fields(payload),
        }

    def validate_update(self, payload: AppointmentUpdate) -> Dict[str, Any]:
        pet_id = to_int(payload.pet_id)
        vet_id = to_int(payload.vet_id)
        if pet_id is None or vet_id is None:
            raise ValidationError("pet_id and vet_id must be integers")
        return {"pet_id": pet_id, "vet_id": vet_id, **self._schedule_fields(payload)}


appointment_service = AppointmentService()
