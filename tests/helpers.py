"""Shared test data builders."""

from datetime import datetime, timedelta, timezone
from typing import Any

TULUM_TZ = timezone(timedelta(hours=-5))


def local_dt(year: int, month: int, day: int, hour: int, minute: int = 0) -> datetime:
    """Venue-local (UTC-5) aware datetime."""
    return datetime(year, month, day, hour, minute, tzinfo=TULUM_TZ)


def weather_body(
    code: int = 1,
    temperature: float = 28.4,
    wind_speed: float = 12.3,
    uv_index_max: float = 9.5,
    precipitation: list[int] | None = None,
) -> dict[str, Any]:
    """Open-Meteo forecast body as returned for the reference point."""
    return {
        "current": {
            "time": "2025-12-01T08:00",
            "temperature_2m": temperature,
            "weather_code": code,
            "wind_speed_10m": wind_speed,
            "apparent_temperature": 31.6,
            "relative_humidity_2m": 70,
        },
        "daily": {
            "time": ["2025-12-01"],
            "uv_index_max": [uv_index_max],
            "sunrise": ["2025-12-01T06:12"],
            "sunset": ["2025-12-01T17:21"],
        },
        "hourly": {
            "time": [f"2025-12-01T{h:02d}:00" for h in range(24)],
            "precipitation_probability": precipitation or [10] * 24,
        },
    }


MARINE_BODY: dict[str, Any] = {
    "current": {"time": "2025-12-01T08:00", "sea_surface_temperature": 27.6}
}
