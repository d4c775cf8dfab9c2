"""Upstream result models - external data shapes."""

from pydantic import BaseModel


class CurrentWeather(BaseModel):
    """Current conditions from the forecast provider."""

    temperature: float | None = None
    apparent_temperature: float | None = None
    relative_humidity: float | None = None
    weather_code: int | None = None
    wind_speed: float | None = None


class DailyWeather(BaseModel):
    """Today's entry from the provider's daily block."""

    uv_index_max: float | None = None
    sunrise: str | None = None  # local ISO timestamp, e.g. "2025-12-01T06:12"
    sunset: str | None = None


class WeatherReading(BaseModel):
    """Parsed forecast response.

    `current` is None when the provider answered without a current block.
    """

    current: CurrentWeather | None = None
    today: DailyWeather = DailyWeather()
    precipitation_probability: float | None = None


class MarineReading(BaseModel):
    """Parsed marine response."""

    sea_surface_temperature: float | None = None


class Venue(BaseModel):
    """Venue row from the directory (read-only)."""

    id: str
    place_id: str
    name: str
    category: str
    lat: float
    lng: float
    rating: float | None = None
    photo_url: str | None = None
    website: str | None = None
