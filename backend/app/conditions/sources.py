"""Concurrent upstream fetch with per-source failure isolation.

Each upstream call is wrapped so it settles to a SourceResult: either a value
or an "unavailable" marker with a reason. The caller decides which sources
are optional and which are fatal.
"""

import asyncio
import time
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Generic, TypeVar

import httpx
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.adapters.marine import fetch_marine
from backend.app.adapters.provenance import Fetched
from backend.app.adapters.venues import fetch_venues
from backend.app.adapters.weather import fetch_weather
from backend.app.config import Settings
from backend.app.models.common import Geo, Provenance
from backend.app.models.readings import MarineReading, Venue, WeatherReading
from backend.app.utils.logging import StructuredSourceLogger
from backend.app.utils.metrics import PrometheusSourceMetrics

T = TypeVar("T")

WEATHER = "weather"
MARINE = "marine"
VENUES = "venues"

# Failures a source may have without being a programming error; ValueError
# covers undecodable bodies and payload validation errors
_SOURCE_ERRORS = (httpx.HTTPError, SQLAlchemyError, ValueError)


@dataclass
class SourceResult(Generic[T]):
    """Settled outcome of one upstream call."""

    source: str
    value: T | None = None
    provenance: Provenance | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class SourceBundle:
    """The three upstream results for one request."""

    weather: SourceResult[WeatherReading]
    marine: SourceResult[MarineReading]
    venues: SourceResult[list[Venue]]


def _error_reason(exc: Exception) -> str:
    if isinstance(exc, httpx.HTTPStatusError):
        return f"http_{exc.response.status_code}"
    return type(exc).__name__


async def guarded(
    source: str,
    call: Awaitable[Fetched[T]],
    source_logger: StructuredSourceLogger,
    metrics: PrometheusSourceMetrics,
) -> SourceResult[T]:
    """Await one upstream call, converting expected failures to a result.

    No retries: a failed call is reported once and the caller's degradation
    rule applies.
    """
    start = time.perf_counter()
    try:
        fetched = await call
    except _SOURCE_ERRORS as e:
        latency_ms = (time.perf_counter() - start) * 1000
        reason = _error_reason(e)
        source_logger.log_fetch(source, "unavailable", latency_ms, error_reason=reason)
        metrics.record_latency(source, "unavailable", latency_ms)
        metrics.inc_error(source, reason)
        return SourceResult(source=source, error=f"{reason}: {e}")

    latency_ms = (time.perf_counter() - start) * 1000
    source_logger.log_fetch(source, "success", latency_ms)
    metrics.record_latency(source, "success", latency_ms)
    return SourceResult(source=source, value=fetched.value, provenance=fetched.provenance)


async def gather_sources(
    client: httpx.AsyncClient,
    session: AsyncSession,
    settings: Settings,
    source_logger: StructuredSourceLogger | None = None,
    metrics: PrometheusSourceMetrics | None = None,
) -> SourceBundle:
    """Fetch weather, marine and venues concurrently and wait for all three.

    Provider calls use the configured reference point, not the caller's
    coordinate: conditions are regional.
    """
    source_logger = source_logger or StructuredSourceLogger()
    metrics = metrics or PrometheusSourceMetrics()
    location = Geo(lat=settings.reference_lat, lon=settings.reference_lng)

    weather, marine, venues = await asyncio.gather(
        guarded(
            WEATHER,
            fetch_weather(
                location,
                client,
                base_url=settings.weather_base_url,
                timezone=settings.provider_timezone,
            ),
            source_logger,
            metrics,
        ),
        guarded(
            MARINE,
            fetch_marine(
                location,
                client,
                base_url=settings.marine_base_url,
                timezone=settings.provider_timezone,
            ),
            source_logger,
            metrics,
        ),
        guarded(VENUES, fetch_venues(session), source_logger, metrics),
    )
    return SourceBundle(weather=weather, marine=marine, venues=venues)
