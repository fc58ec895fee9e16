"""
PetCarePlus Backend: Appointment Request/Response Schemas
===========================================================

Dates and times travel as ISO strings ("2025-03-14", "09:30"); the service
parses them so a malformed value is a 400, not a store error.
"""

from datetime import date, time
from typing import Any, Optional

from pydantic import BaseModel, Field


class AppointmentUpdate(BaseModel):
    """Body of PUT /api/appointments/{id}."""
    pet_id: Any = None
    vet_id: Any = None
    appointment_date: Optional[str] = Field(default=None, description="YYYY-MM-DD")
    appointment_time: Optional[str] = Field(default=None, description="HH:MM or HH:MM:SS")
    reason: Optional[str] = None
    status: Optional[str] = None

    model_config = {"coerce_numbers_to_str": True}


class AppointmentCreate(AppointmentUpdate):
    """Body of POST /api/appointments."""
    appointment_id: Any = Field(default=None, description="Caller-supplied integer key")


class AppointmentResponse(BaseModel):
    appointment_id: int
    pet_id: int
    vet_id: int
    appointment_date: date
    appointment_time: time
    reason: str
    status: str

    model_config = {"from_attributes": True}


class AppointmentCreatedResponse(BaseModel):
    message: str = Field(default="Appointment created")
    appointment_id: int
