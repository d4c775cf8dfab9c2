"""Weather adapter using Open-Meteo API (keyless, free tier)."""

from typing import Any

import httpx
from pydantic import BaseModel

from backend.app.adapters.provenance import Fetched, provenance_for_http
from backend.app.models.common import Geo
from backend.app.models.readings import CurrentWeather, DailyWeather, WeatherReading

CURRENT_FIELDS = (
    "temperature_2m,weather_code,wind_speed_10m,apparent_temperature,relative_humidity_2m"
)
DAILY_FIELDS = "uv_index_max,sunrise,sunset"
HOURLY_FIELDS = "precipitation_probability"


class OpenMeteoCurrent(BaseModel):
    """`current` block of the forecast body."""

    time: str | None = None
    temperature_2m: float | None = None
    apparent_temperature: float | None = None
    relative_humidity_2m: float | None = None
    weather_code: int | None = None
    wind_speed_10m: float | None = None


class OpenMeteoDaily(BaseModel):
    uv_index_max: list[float | None] = []
    sunrise: list[str | None] = []
    sunset: list[str | None] = []


class OpenMeteoHourly(BaseModel):
    time: list[str | None] = []
    precipitation_probability: list[float | None] = []


class OpenMeteoForecast(BaseModel):
    """Forecast body; unrequested blocks and fields are ignored.

    Any other shape fails validation, which callers treat as the source being
    unavailable.
    """

    current: OpenMeteoCurrent | None = None
    daily: OpenMeteoDaily | None = None
    hourly: OpenMeteoHourly | None = None


def _first(values: list[Any]) -> Any:
    if not values:
        return None
    return values[0]


def _current_hour_value(hourly: OpenMeteoHourly, current_time: str | None) -> float | None:
    """Pick the hourly precipitation for the hour of `current_time`, else the first one."""
    values = hourly.precipitation_probability
    if current_time and values:
        hour_key = current_time[:13]  # "YYYY-MM-DDTHH"
        for i, t in enumerate(hourly.time):
            if t is not None and t[:13] == hour_key and i < len(values):
                return values[i]
    return _first(values)


def parse_weather(data: Any) -> WeatherReading:
    """Parse an Open-Meteo forecast body.

    Response structure: {current: {time, ...}, daily: {uv_index_max: [...], ...},
    hourly: {time: [...], precipitation_probability: [...]}}

    Raises:
        pydantic.ValidationError: If the body does not have that shape
    """
    payload = OpenMeteoForecast.model_validate(data)

    current = None
    block = payload.current
    if block is not None and block.model_fields_set:
        current = CurrentWeather(
            temperature=block.temperature_2m,
            apparent_temperature=block.apparent_temperature,
            relative_humidity=block.relative_humidity_2m,
            weather_code=block.weather_code,
            wind_speed=block.wind_speed_10m,
        )

    daily = payload.daily or OpenMeteoDaily()
    hourly = payload.hourly or OpenMeteoHourly()

    return WeatherReading(
        current=current,
        today=DailyWeather(
            uv_index_max=_first(daily.uv_index_max),
            sunrise=_first(daily.sunrise),
            sunset=_first(daily.sunset),
        ),
        precipitation_probability=_current_hour_value(
            hourly, block.time if block is not None else None
        ),
    )


async def fetch_weather(
    location: Geo,
    client: httpx.AsyncClient,
    base_url: str = "https://api.open-meteo.com/v1/forecast",
    timezone: str = "America/Cancun",
) -> Fetched[WeatherReading]:
    """Fetch current conditions and today's daily values from Open-Meteo.

    Args:
        location: Geographic coordinates
        client: Shared httpx client (owns timeouts)
        base_url: Open-Meteo forecast endpoint
        timezone: Timezone for daily/hourly timestamps

    Returns:
        Fetched WeatherReading with provenance

    Raises:
        httpx.HTTPError: On network or HTTP errors
        ValueError: If the body is not JSON or not a forecast payload
    """
    # Docs: https://open-meteo.com/en/docs
    params: dict[str, str | float] = {
        "latitude": location.lat,
        "longitude": location.lon,
        "current": CURRENT_FIELDS,
        "daily": DAILY_FIELDS,
        "hourly": HOURLY_FIELDS,
        "timezone": timezone,
    }
    url = f"{base_url}?{'&'.join(f'{k}={v}' for k, v in params.items())}"

    response = await client.get(base_url, params=params)
    response.raise_for_status()

    return Fetched(
        value=parse_weather(response.json()),
        provenance=provenance_for_http(source="weather.open_meteo", url=url),
    )
