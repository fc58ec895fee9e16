"""
PetCarePlus Backend: Shared Response Schemas
==============================================

Small envelopes reused by several routers.
"""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain confirmation, e.g. {"message": "Owner updated"}."""
    message: str = Field(description="Human-readable confirmation")


class ErrorResponse(BaseModel):
    """
    What:  Body of every error response.
    Who:   Produced by the global exception handlers in main.py; referenced
           in route `responses=` declarations for the OpenAPI docs.
    """
    error: str = Field(description="Human-readable error message")
