"""
PetCarePlus Backend: Owner Request/Response Schemas
=====================================================

Request models are loose: key fields accept any JSON value and OwnerService
decides what counts as an integer, reporting the API's own 400 messages.
Text fields also accept JSON numbers and keep them as their decimal text.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class OwnerBase(BaseModel):
    first_name: Optional[str] = Field(default=None, description="Required")
    last_name: Optional[str] = Field(default=None, description="Required")
    phone: Optional[str] = Field(default=None, description="Optional, stored as '' when omitted")
    email: Optional[str] = Field(default=None, description="Required, must look like an email")
    address: Optional[str] = Field(default=None, description="Optional, stored as '' when omitted")

    model_config = {"coerce_numbers_to_str": True}


class OwnerCreate(OwnerBase):
    """Body of POST /api/owners."""
    owner_id: Any = Field(default=None, description="Caller-supplied integer key")


class OwnerUpdate(OwnerBase):
    """Body of PUT /api/owners/{id}; the key comes from the path."""


class OwnerResponse(BaseModel):
    owner_id: int
    first_name: str
    last_name: str
    phone: str
    email: str
    address: str

    model_config = {"from_attributes": True}


class OwnerCreatedResponse(BaseModel):
    message: str = Field(default="Owner created")
    owner_id: int
