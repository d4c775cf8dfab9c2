"""Pulse (single-screen summary) response models."""

from pydantic import Field

from backend.app.models.common import CamelModel, TimeSegment


class PulseWeather(CamelModel):
    """Current weather digest."""

    temp: int | None
    feels_like: int | None
    humidity: float | None
    code: int | None
    label: str
    emoji: str
    wind_speed: int | None
    uv_index: float
    uv_label: str
    uv_color: str
    water_temp: int | None


class SunTimes(CamelModel):
    """Sunrise/sunset in venue-local time."""

    sunrise: str | None
    sunset: str | None
    sunset_iso: str | None = Field(None, alias="sunsetISO")


class TopBeach(CamelModel):
    """Best-scoring beach right now."""

    name: str
    score: float
    rating: str
    emoji: str
    sargassum: str
    crowd: str
    photo_url: str | None = None


class PulseResponse(CamelModel):
    """GET /pulse payload."""

    time_segment: TimeSegment
    hour: int
    weather: PulseWeather | None
    sun: SunTimes
    top_beach: TopBeach | None
    sargassum_level: str
