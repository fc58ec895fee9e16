"""
PetCarePlus Backend: Weather Routes
=====================================

What:  POST /api/weather/fetch (look up and log current conditions) and
       GET /api/weather/logs (latest 50 readings). Both need a session.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from petcareplus.auth import require_login
from petcareplus.database import get_db_session
from petcareplus.schemas.common import ErrorResponse
from petcareplus.schemas.weather import (
    WeatherFetchRequest,
    WeatherFetchResponse,
    WeatherLogResponse,
)
from petcareplus.services.weather_service import weather_service

router = APIRouter(
    prefix="/api/weather",
    tags=["Weather"],
    dependencies=[Depends(require_login)],
)


@router.post(
    "/fetch",
    status_code=201,
    response_model=WeatherFetchResponse,
    responses={
        400: {"description": "Unsupported city", "model": ErrorResponse},
        401: {"description": "Not logged in", "model": ErrorResponse},
        502: {"description": "Provider returned no current weather", "model": ErrorResponse},
    },
    summary="Fetch current weather for a supported city and log it",
)
async def fetch_weather(
    payload: Optional[WeatherFetchRequest] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> WeatherFetchResponse:
    city = payload.city if payload is not None else None
    reading = await weather_service.fetch_and_log(db, city)
    return WeatherFetchResponse(message="Weather fetched and saved", data=reading)


@router.get(
    "/logs",
    response_model=List[WeatherLogResponse],
    summary="Latest weather readings, newest first",
)
async def weather_logs(db: AsyncSession = Depends(get_db_session)) -> List[WeatherLogResponse]:
    return await weather_service.recent_logs(db)
