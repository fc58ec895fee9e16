"""
PetCarePlus Backend: Login Schemas
"""

from typing import Optional

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Body of POST /api/login. Presence and shape are checked by AuthService."""
    email: Optional[str] = None
    password: Optional[str] = None

    model_config = {"coerce_numbers_to_str": True}


class LoginResponse(BaseModel):
    message: str = Field(default="Logged in successfully")
    role: str = Field(description="Role stored in the session: guest, user or admin")
