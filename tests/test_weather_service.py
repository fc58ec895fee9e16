"""
PetCarePlus Backend: Weather Service Tests
============================================

What:  City resolution, the provider call (through httpx.MockTransport) and
       the /api/weather routes with the provider patched out.
"""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from petcareplus.exceptions import DatabaseError, UpstreamError, ValidationError
from petcareplus.services.weather_service import (
    CITY_COORDS,
    LOG_LIMIT,
    WeatherService,
    weather_service,
)

API_URL = "https://weather.test/v1/forecast"


def _service(handler) -> WeatherService:
    return WeatherService(api_url=API_URL, transport=httpx.MockTransport(handler))


class TestResolveCity:

    @pytest.mark.parametrize("city", [None, ""])
    def test_default_is_toronto(self, city):
        assert WeatherService.resolve_city(city) == ("Toronto", CITY_COORDS["toronto"])

    def test_case_and_whitespace_insensitive(self):
        name, coords = WeatherService.resolve_city("  oShAwA ")
        assert name == "oShAwA"
        assert coords == CITY_COORDS["oshawa"]

    @pytest.mark.parametrize("city", ["Paris", "   ", 42, ["Ajax"]])
    def test_unsupported(self, city):
        with pytest.raises(ValidationError, match="Unsupported city for this demo"):
            WeatherService.resolve_city(city)


class TestFetchCurrentWeather:

    @pytest.mark.asyncio
    async def test_sends_coordinates_and_flag(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = request.url
            return httpx.Response(200, json={"current_weather": {"temperature": 3.5, "windspeed": 12.0}})

        current = await _service(handler).fetch_current_weather(CITY_COORDS["ajax"])

        assert current == {"temperature": 3.5, "windspeed": 12.0}
        assert seen["url"].host == "weather.test"
        assert seen["url"].params["latitude"] == "43.8509"
        assert seen["url"].params["longitude"] == "-79.0204"
        assert seen["url"].params["current_weather"] == "true"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [
        {},
        {"current_weather": None},
        {"current_weather": "sunny"},
        {"current_weather": {"temperature": 1.0}},
        [],
    ])
    async def test_missing_current_weather_is_upstream_error(self, payload):
        service = _service(lambda request: httpx.Response(200, json=payload))
        with pytest.raises(UpstreamError) as exc_info:
            await service.fetch_current_weather(CITY_COORDS["toronto"])
        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "No current weather data returned"

    @pytest.mark.asyncio
    async def test_http_error_propagates(self):
        service = _service(lambda request: httpx.Response(503, text="down"))
        with pytest.raises(httpx.HTTPStatusError):
            await service.fetch_current_weather(CITY_COORDS["toronto"])

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self):
        def handler(request):
            raise httpx.ConnectError("unreachable", request=request)

        with pytest.raises(httpx.ConnectError):
            await _service(handler).fetch_current_weather(CITY_COORDS["toronto"])


class TestFetchAndLog:

    @pytest.mark.asyncio
    async def test_store_failure_is_database_error(self, mock_db_session):
        from sqlalchemy.exc import OperationalError

        service = _service(
            lambda request: httpx.Response(200, json={"current_weather": {"temperature": 1, "windspeed": 2}})
        )
        mock_db_session.execute.side_effect = OperationalError("INSERT", {}, Exception("gone"))

        with pytest.raises(DatabaseError):
            await service.fetch_and_log(mock_db_session, "Whitby")
        mock_db_session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unsupported_city_never_calls_provider(self, mock_db_session):
        def handler(request):
            raise AssertionError("provider must not be called")

        with pytest.raises(ValidationError):
            await _service(handler).fetch_and_log(mock_db_session, "Paris")
        mock_db_session.execute.assert_not_awaited()


class TestWeatherRoutes:

    @pytest.mark.asyncio
    async def test_fetch_logs_reading(self, user_client):
        current = {"temperature": -4.2, "windspeed": 18.5}
        with patch.object(weather_service, "fetch_current_weather", AsyncMock(return_value=current)) as fetch:
            response = await user_client.post("/api/weather/fetch", json={"city": "Ajax"})

        assert response.status_code == 201
        assert response.json() == {
            "message": "Weather fetched and saved",
            "data": {"city": "Ajax", "temperature_c": -4.2, "windspeed": 18.5},
        }
        fetch.assert_awaited_once_with(CITY_COORDS["ajax"])

        logs = (await user_client.get("/api/weather/logs")).json()
        assert len(logs) == 1
        assert logs[0]["city"] == "Ajax"
        assert logs[0]["temperature_c"] == -4.2
        assert "logged_at" in logs[0]

    @pytest.mark.asyncio
    async def test_fetch_without_body_uses_toronto(self, user_client):
        current = {"temperature": 10, "windspeed": 5}
        with patch.object(weather_service, "fetch_current_weather", AsyncMock(return_value=current)):
            response = await user_client.post("/api/weather/fetch")
        assert response.status_code == 201
        assert response.json()["data"]["city"] == "Toronto"

    @pytest.mark.asyncio
    async def test_unsupported_city_is_400(self, user_client):
        response = await user_client.post("/api/weather/fetch", json={"city": "Paris"})
        assert response.status_code == 400
        assert response.json() == {"error": "Unsupported city for this demo"}

    @pytest.mark.asyncio
    async def test_upstream_error_is_502(self, user_client):
        failing = AsyncMock(side_effect=UpstreamError())
        with patch.object(weather_service, "fetch_current_weather", failing):
            response = await user_client.post("/api/weather/fetch", json={"city": "Toronto"})
        assert response.status_code == 502
        assert response.json() == {"error": "No current weather data returned"}
        assert (await user_client.get("/api/weather/logs")).json() == []

    @pytest.mark.asyncio
    async def test_provider_failure_is_500(self, user_client):
        request = httpx.Request("GET", API_URL)
        failing = AsyncMock(side_effect=httpx.ConnectError("unreachable", request=request))
        with patch.object(weather_service, "fetch_current_weather", failing):
            response = await user_client.post("/api/weather/fetch", json={"city": "Toronto"})
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    @pytest.mark.asyncio
    async def test_logs_newest_first_and_capped(self, user_client):
        counter = iter(range(LOG_LIMIT + 5))

        async def fake_fetch(coords):
            return {"temperature": float(next(counter)), "windspeed": 1.0}

        with patch.object(weather_service, "fetch_current_weather", side_effect=fake_fetch):
            for _ in range(LOG_LIMIT + 5):
                await user_client.post("/api/weather/fetch", json={"city": "Whitby"})

        logs = (await user_client.get("/api/weather/logs")).json()
        assert len(logs) == LOG_LIMIT
        temperatures = [entry["temperature_c"] for entry in logs]
        assert temperatures[0] == float(LOG_LIMIT + 4)
        assert temperatures == sorted(temperatures, reverse=True)

    @pytest.mark.asyncio
    async def test_requires_login(self, client):
        assert (await client.get("/api/weather/logs")).status_code == 401
        assert (await client.post("/api/weather/fetch", json={})).status_code == 401
