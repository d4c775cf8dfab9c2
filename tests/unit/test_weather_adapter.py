"""Tests for the Open-Meteo weather and marine adapters."""

import httpx
import pytest
from pydantic import ValidationError

from backend.app.adapters.marine import fetch_marine
from backend.app.adapters.weather import fetch_weather, parse_weather
from backend.app.models.common import Geo
from tests.helpers import MARINE_BODY, weather_body

TULUM = Geo(lat=20.2114, lon=-87.4654)


@pytest.mark.asyncio
async def test_fetch_weather_parses_open_meteo_response() -> None:
    """Test that weather adapter parses current, daily and hourly blocks."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=weather_body())

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))

    result = await fetch_weather(location=TULUM, client=client)

    assert result.provenance.source == "source.weather.open_meteo"
    assert result.provenance.source_url is not None
    assert "open-meteo.com" in result.provenance.source_url

    reading = result.value
    assert reading.current is not None
    assert reading.current.temperature == 28.4
    assert reading.current.weather_code == 1
    assert reading.current.wind_speed == 12.3
    assert reading.current.apparent_temperature == 31.6
    assert reading.current.relative_humidity == 70
    assert reading.today.uv_index_max == 9.5
    assert reading.today.sunrise == "2025-12-01T06:12"
    assert reading.today.sunset == "2025-12-01T17:21"
    assert reading.precipitation_probability == 10

    await client.aclose()


@pytest.mark.asyncio
async def test_fetch_weather_constructs_correct_url() -> None:
    """Test that weather adapter requests the fixed field set."""
    captured_requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured_requests.append(request)
        return httpx.Response(200, json=weather_body())

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))

    await fetch_weather(
        location=TULUM,
        client=client,
        base_url="https://api.open-meteo.com/v1/forecast",
    )

    assert len(captured_requests) == 1
    req = captured_requests[0]
    assert str(req.url).startswith("https://api.open-meteo.com/v1/forecast")

    params = dict(req.url.params)
    assert params["latitude"] == "20.2114"
    assert params["longitude"] == "-87.4654"
    assert "weather_code" in params["current"]
    assert "wind_speed_10m" in params["current"]
    assert params["daily"] == "uv_index_max,sunrise,sunset"
    assert params["hourly"] == "precipitation_probability"
    assert params["timezone"] == "America/Cancun"

    await client.aclose()


@pytest.mark.asyncio
async def test_fetch_weather_raises_on_http_error() -> None:
    """Non-success responses raise so the caller can degrade."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"error": True})

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))

    with pytest.raises(httpx.HTTPStatusError):
        await fetch_weather(location=TULUM, client=client)

    await client.aclose()


def test_parse_weather_picks_current_hour_precipitation() -> None:
    """Hourly precipitation is read at the current block's hour."""
    body = weather_body(precipitation=[0] * 8 + [70] + [0] * 15)

    assert parse_weather(body).precipitation_probability == 70


def test_parse_weather_handles_missing_blocks() -> None:
    """Missing blocks leave fields empty instead of failing."""
    reading = parse_weather({})

    assert reading.current is None
    assert reading.today.uv_index_max is None
    assert reading.today.sunrise is None
    assert reading.precipitation_probability is None


def test_parse_weather_handles_null_values() -> None:
    """Null provider values stay None."""
    reading = parse_weather(
        {
            "current": {"temperature_2m": None, "weather_code": None},
            "daily": {"uv_index_max": [None]},
        }
    )

    assert reading.current is not None
    assert reading.current.temperature is None
    assert reading.current.weather_code is None
    assert reading.today.uv_index_max is None


@pytest.mark.asyncio
async def test_fetch_marine_parses_sea_surface_temperature() -> None:
    captured_requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured_requests.append(request)
        return httpx.Response(200, json=MARINE_BODY)

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))

    result = await fetch_marine(location=TULUM, client=client)

    assert result.value.sea_surface_temperature == 27.6
    assert result.provenance.source == "source.marine.open_meteo"
    assert captured_requests[0].url.host == "marine-api.open-meteo.com"
    assert dict(captured_requests[0].url.params)["current"] == "sea_surface_temperature"

    await client.aclose()


@pytest.mark.parametrize(
    "body",
    [
        {"current": ["unexpected"]},
        [1, 2, 3],
        {"hourly": {"time": None, "precipitation_probability": 10}},
    ],
)
def test_parse_weather_rejects_unexpected_shapes(body: object) -> None:
    """Wrong shapes raise a ValueError the source wrapper absorbs."""
    with pytest.raises(ValidationError):
        parse_weather(body)


def test_parse_weather_skips_null_hourly_times() -> None:
    body = weather_body(precipitation=[0] * 8 + [70] + [0] * 15)
    body["hourly"]["time"][3] = None

    assert parse_weather(body).precipitation_probability == 70


@pytest.mark.asyncio
async def test_fetch_marine_rejects_unexpected_shape() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"current": [27.6]})

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))

    with pytest.raises(ValueError):
        await fetch_marine(location=TULUM, client=client)

    await client.aclose()
