"""
PetCarePlus Backend: Pet Request/Response Schemas
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class PetUpdate(BaseModel):
    """Body of PUT /api/pets/{id}."""
    name: Optional[str] = None
    species: Optional[str] = None
    gender: Optional[str] = None
    owner_id: Any = Field(default=None, description="Integer; not checked against Owner")

    model_config = {"coerce_numbers_to_str": True}


class PetCreate(PetUpdate):
    """Body of POST /api/pets."""
    pet_id: Any = Field(default=None, description="Caller-supplied integer key")


class PetResponse(BaseModel):
    pet_id: int
    name: str
    species: str
    gender: str
    owner_id: int

    model_config = {"from_attributes": True}


class PetCreatedResponse(BaseModel):
    message: str = Field(default="Pet created")
    pet_id: int
