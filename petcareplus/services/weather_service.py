"""
PetCarePlus Backend: Weather Service
======================================

What:  Looks up current conditions for a supported city on Open-Meteo and
       appends the reading to WeatherLog; also reads the log back.
How:   One GET per fetch through httpx.AsyncClient with the library's default
       timeout, then one INSERT.
Who:   Called by the /api/weather routes.

Failure handling:
    - City not in CITY_COORDS            → ValidationError (400)
    - Provider answers without a usable
      `current_weather` object           → UpstreamError (502)
    - Transport error / non-2xx status   → logged and re-raised; the global
                                           catch-all answers 500
    - Store failure                      → DatabaseError (500)

No retry, backoff or caching.
"""

import logging
from typing import Any, Dict, List, NamedTuple, Optional, Tuple

import httpx
from sqlalchemy import insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from petcareplus.config import settings
from petcareplus.exceptions import DatabaseError, UpstreamError, ValidationError
from petcareplus.models.weather_log import WeatherLog
from petcareplus.schemas.weather import WeatherLogResponse, WeatherReading

logger = logging.getLogger(__name__)

DEFAULT_CITY = "Toronto"
LOG_LIMIT = 50


class Coordinates(NamedTuple):
    latitude: float
    longitude: float


CITY_COORDS: Dict[str, Coordinates] = {
    "toronto": Coordinates(43.65107, -79.347015),
    "ajax": Coordinates(43.8509, -79.0204),
    "whitby": Coordinates(43.8971, -78.942),
    "oshawa": Coordinates(43.8971, -78.8658),
}


class WeatherService:
    """
    Open-Meteo client plus WeatherLog persistence.

    Args:
        api_url:    Forecast endpoint (defaults to settings.weather_api_url)
        transport:  Optional httpx transport, e.g. httpx.MockTransport in tests
    """

    def __init__(
        self,
        api_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_url = api_url or settings.weather_api_url
        self._transport = transport

    @staticmethod
    def resolve_city(city: Any) -> Tuple[str, Coordinates]:
        """
        Normalize the requested city and find its coordinates.

        Returns the trimmed city name as typed (used for the log row) with
        its coordinates. An absent or empty city means DEFAULT_CITY.
        """
        if city is None or city == "":
            city = DEFAULT_CITY
        if not isinstance(city, str):
            raise ValidationError("Unsupported city for this demo", field="city")
        name = city.strip()
        coords = CITY_COORDS.get(name.lower())
        if coords is None:
            raise ValidationError("Unsupported city for this demo", field="city")
        return name, coords

    async def fetch_current_weather(self, coords: Coordinates) -> Dict[str, Any]:
        """
        Call the provider once and return its `current_weather` object.

        Raises:
            UpstreamError: the response has no usable current_weather payload
            httpx.HTTPError: transport failure or non-2xx status (propagated)
        """
        params = {
            "latitude": coords.latitude,
            "longitude": coords.longitude,
            "current_weather": "true",
        }
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(self.api_url, params=params)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as e:
            logger.error("Weather provider request failed: %s", e)
            raise

        current = payload.get("current_weather") if isinstance(payload, dict) else None
        if not isinstance(current, dict):
            raise UpstreamError(context={"params": params})
        if current.get("temperature") is None or current.get("windspeed") is None:
            raise UpstreamError(context={"params": params, "current_weather": current})
        return current

    async def fetch_and_log(self, db: AsyncSession, city: Any) -> WeatherReading:
        """Resolve the city, fetch current conditions, append one WeatherLog row."""
        name, coords = self.resolve_city(city)
        current = await self.fetch_current_weather(coords)

        reading = WeatherReading(
            city=name,
            temperature_c=current["temperature"],
            windspeed=current["windspeed"],
        )
        try:
            await db.execute(insert(WeatherLog).values(**reading.model_dump()))
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("DB error saving weather for %s: %s", name, e, exc_info=True)
            await db.rollback()
            raise DatabaseError(context={"city": name}) from e

        logger.info(
            "Weather logged for %s: %.1f°C, wind %.1f",
            name, reading.temperature_c, reading.windspeed,
        )
        return reading

    async def recent_logs(self, db: AsyncSession, limit: int = LOG_LIMIT) -> List[WeatherLogResponse]:
        """Newest `limit` WeatherLog rows, newest first."""
        try:
            result = await db.execute(
                select(WeatherLog)
                .order_by(WeatherLog.logged_at.desc(), WeatherLog.id.desc())
                .limit(limit)
            )
            rows = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("DB error reading weather logs: %s", e, exc_info=True)
            raise DatabaseError(context={"table": "WeatherLog"}) from e
        return [WeatherLogResponse.model_validate(row) for row in rows]


weather_service = WeatherService()
