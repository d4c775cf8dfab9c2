"""Beach conditions aggregation: fetch, filter, score, rank, forecast.

Weather and marine data are optional; the venue directory is not. Everything
is recomputed per request and nothing is written back.
"""

import math
from datetime import datetime

import httpx
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.conditions.sources import SourceBundle, gather_sources
from backend.app.config import Settings
from backend.app.models.common import CrowdLevel, Geo
from backend.app.models.conditions import (
    BeachConditionsResponse,
    ScoredBeach,
    ScoringInput,
    WeatherSummary,
)
from backend.app.models.pulse import PulseResponse, PulseWeather, SunTimes, TopBeach
from backend.app.models.readings import Venue, WeatherReading
from backend.app.scoring.crowd import estimate_crowd_level
from backend.app.scoring.ranking import baseline_score, build_forecast, rank_beaches
from backend.app.scoring.tulum import round_half_up, score
from backend.app.scoring.weather import (
    pulse_weather_label,
    uv_label,
    weather_emoji,
    weather_label,
)
from backend.app.utils.clock import format_local_time, local_now, time_segment
from backend.app.utils.geo import haversine_km, is_in_beach_zone


class ConditionsError(Exception):
    """Aggregation failed and no response can be produced."""

    pass


class VenueDirectoryError(ConditionsError):
    """The venue directory could not be read."""

    pass


def beach_clubs(venues: list[Venue], settings: Settings) -> list[Venue]:
    """Venues categorized as clubs inside the beach zone, in retrieval order."""
    return [
        v for v in venues if v.category == "club" and is_in_beach_zone(v.lat, v.lng, settings)
    ]


def scoring_input(
    settings: Settings,
    crowd_level: CrowdLevel,
    weather: WeatherReading | None,
    distance_km: float | None = None,
) -> ScoringInput:
    """Assemble scorer inputs for one venue.

    Sargassum and amenities come from configured placeholders; the directory
    carries no amenity data and no live sargassum feed is integrated.
    """
    current = weather.current if weather else None
    return ScoringInput(
        sargassum_level=settings.default_sargassum_level,
        crowd_level=crowd_level,
        temperature=current.temperature if current else None,
        wind_speed=current.wind_speed if current else None,
        weather_code=current.weather_code if current else None,
        uv_index=weather.today.uv_index_max if weather else None,
        precipitation=weather.precipitation_probability if weather else None,
        has_restrooms=settings.placeholder_has_restrooms,
        has_showers=settings.placeholder_has_showers,
        has_food=settings.placeholder_has_food,
        has_umbrellas=settings.placeholder_has_umbrellas,
        has_lifeguard=settings.placeholder_has_lifeguard,
        distance_from_user=distance_km,
        parking_available=settings.placeholder_parking_available,
    )


def _require_venues(bundle: SourceBundle) -> list[Venue]:
    if not bundle.venues.ok or bundle.venues.value is None:
        raise VenueDirectoryError(f"Venue directory unavailable ({bundle.venues.error})")
    return bundle.venues.value


def _round_int(value: float | None) -> int | None:
    if value is None:
        return None
    return math.floor(value + 0.5)


def assemble_beach_conditions(
    bundle: SourceBundle,
    settings: Settings,
    origin: Geo,
    now: datetime,
) -> BeachConditionsResponse:
    """Score and rank settled sources into the dashboard response.

    Raises:
        VenueDirectoryError: If the venue source is unavailable
    """
    venues = beach_clubs(_require_venues(bundle), settings)
    weather = bundle.weather.value if bundle.weather.ok else None
    current = weather.current if weather else None
    crowd_level = estimate_crowd_level(now)
    label = weather_label(current.weather_code if current else None)

    scored = []
    for venue in venues:
        distance = haversine_km(origin.lat, origin.lon, venue.lat, venue.lng)
        result = score(scoring_input(settings, crowd_level, weather, distance_km=distance))
        scored.append(
            ScoredBeach(
                id=venue.id,
                place_id=venue.place_id,
                name=venue.name,
                lat=venue.lat,
                lng=venue.lng,
                distance=round_half_up(distance),
                sargassum_level=settings.default_sargassum_level,
                crowd_level=crowd_level.value,
                weather_label=label,
                tulum_score=result,
                photo_url=venue.photo_url,
                url=venue.website,
            )
        )

    ranked = rank_beaches(scored)
    forecast = build_forecast(baseline_score(ranked), now.date())

    summary = None
    if current is not None:
        summary = WeatherSummary(
            temp=current.temperature,
            code=current.weather_code,
            wind_speed=current.wind_speed,
        )

    return BeachConditionsResponse(beaches=ranked, forecast=forecast, weather=summary)


def assemble_pulse(bundle: SourceBundle, settings: Settings, now: datetime) -> PulseResponse:
    """Condense settled sources into the single-screen pulse summary.

    Raises:
        VenueDirectoryError: If the venue source is unavailable
    """
    venues = beach_clubs(_require_venues(bundle), settings)
    weather = bundle.weather.value if bundle.weather.ok else None
    marine = bundle.marine.value if bundle.marine.ok else None
    crowd_level = estimate_crowd_level(now)

    # No caller coordinate here: accessibility uses its baseline
    scored = [
        (venue, score(scoring_input(settings, crowd_level, weather))) for venue in venues
    ]
    scored.sort(key=lambda pair: pair[1].score, reverse=True)

    top_beach = None
    if scored:
        venue, result = scored[0]
        top_beach = TopBeach(
            name=venue.name,
            score=result.score,
            rating=result.rating,
            emoji=result.emoji,
            sargassum=settings.default_sargassum_level,
            crowd=crowd_level.value,
            photo_url=venue.photo_url,
        )

    current = weather.current if weather else None
    pulse_weather = None
    if current is not None:
        uv_max = weather.today.uv_index_max if weather and weather.today.uv_index_max else 0.0
        uv_text, uv_color = uv_label(uv_max)
        code = current.weather_code if current.weather_code is not None else 0
        pulse_weather = PulseWeather(
            temp=_round_int(current.temperature),
            feels_like=_round_int(current.apparent_temperature),
            humidity=current.relative_humidity,
            code=current.weather_code,
            label=pulse_weather_label(code),
            emoji=weather_emoji(code),
            wind_speed=_round_int(current.wind_speed),
            uv_index=uv_max,
            uv_label=uv_text,
            uv_color=uv_color,
            water_temp=_round_int(marine.sea_surface_temperature) if marine else None,
        )

    sunrise = weather.today.sunrise if weather else None
    sunset = weather.today.sunset if weather else None

    return PulseResponse(
        time_segment=time_segment(now.hour),
        hour=now.hour,
        weather=pulse_weather,
        sun=SunTimes(
            sunrise=format_local_time(sunrise),
            sunset=format_local_time(sunset),
            sunset_iso=sunset,
        ),
        top_beach=top_beach,
        sargassum_level=settings.default_sargassum_level,
    )


async def build_beach_conditions(
    client: httpx.AsyncClient,
    session: AsyncSession,
    settings: Settings,
    origin: Geo | None = None,
    now: datetime | None = None,
) -> BeachConditionsResponse:
    """Fetch all sources and build the beach-conditions response.

    Args:
        client: Shared HTTP client for the weather and marine providers
        session: Database session for the venue directory
        settings: Application settings
        origin: Caller coordinate for distances (default: reference point)
        now: Override for the current time (default: venue-local now)

    Raises:
        VenueDirectoryError: If the venue directory call fails
    """
    if origin is None:
        origin = Geo(lat=settings.reference_lat, lon=settings.reference_lng)
    local = local_now(settings.local_utc_offset_hours, now)
    bundle = await gather_sources(client, session, settings)
    return assemble_beach_conditions(bundle, settings, origin, local)


async def build_pulse(
    client: httpx.AsyncClient,
    session: AsyncSession,
    settings: Settings,
    now: datetime | None = None,
) -> PulseResponse:
    """Fetch all sources and build the pulse response.

    Raises:
        VenueDirectoryError: If the venue directory call fails
    """
    local = local_now(settings.local_utc_offset_hours, now)
    bundle = await gather_sources(client, session, settings)
    return assemble_pulse(bundle, settings, local)
