"""Pulse endpoint - GET /api/pulse."""

from typing import Annotated

import httpx
from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api.deps import get_http_client
from backend.app.cache import ResponseCache, cache_key, get_response_cache
from backend.app.conditions.aggregator import build_pulse
from backend.app.config import Settings, get_settings
from backend.app.db.engine import get_session
from backend.app.models.pulse import PulseResponse
from backend.app.utils.metrics import PrometheusSourceMetrics

router = APIRouter(prefix="/api")

ENDPOINT = "pulse"


@router.get("/pulse", response_model=PulseResponse)
async def pulse(
    response: Response,
    client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
    session: Annotated[AsyncSession, Depends(get_session)],
    settings: Annotated[Settings, Depends(get_settings)],
    cache: Annotated[ResponseCache, Depends(get_response_cache)],
) -> PulseResponse:
    """Single-screen summary: time of day, weather, sun, top beach."""
    ttl = settings.response_cache_ttl_seconds
    response.headers["Cache-Control"] = f"public, s-maxage={ttl}"

    key = cache_key(ENDPOINT)
    cached = cache.get(key)
    if cached is not None:
        PrometheusSourceMetrics().inc_cache_hit(ENDPOINT)
        return PulseResponse.model_validate(cached)

    result = await build_pulse(client, session, settings)

    cache.set(key, result.model_dump(mode="json", by_alias=True), ttl)
    return result
