"""
PetCarePlus Backend: Weather Schemas
======================================

What:  Contracts for POST /api/weather/fetch and GET /api/weather/logs.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class WeatherFetchRequest(BaseModel):
    """Optional body; an absent or empty city means Toronto."""
    city: Optional[str] = Field(default=None, description="Toronto, Ajax, Whitby or Oshawa")

    model_config = {"coerce_numbers_to_str": True}


class WeatherReading(BaseModel):
    city: str = Field(description="City name as sent by the client (trimmed)")
    temperature_c: float
    windspeed: float


class WeatherFetchResponse(BaseModel):
    message: str = Field(default="Weather fetched and saved")
    data: WeatherReading


class WeatherLogResponse(BaseModel):
    id: int
    city: str
    temperature_c: float
    windspeed: float
    logged_at: datetime

    model_config = {"from_attributes": True}
