"""Beach conditions endpoint - GET /api/beach-conditions."""

from typing import Annotated

import httpx
from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api.deps import get_http_client
from backend.app.cache import ResponseCache, cache_key, get_response_cache
from backend.app.conditions.aggregator import build_beach_conditions
from backend.app.config import Settings, get_settings
from backend.app.db.engine import get_session
from backend.app.models.common import Geo
from backend.app.models.conditions import BeachConditionsResponse
from backend.app.utils.metrics import PrometheusSourceMetrics

router = APIRouter(prefix="/api")

ENDPOINT = "beach-conditions"


@router.get("/beach-conditions", response_model=BeachConditionsResponse)
async def beach_conditions(
    response: Response,
    client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
    session: Annotated[AsyncSession, Depends(get_session)],
    settings: Annotated[Settings, Depends(get_settings)],
    cache: Annotated[ResponseCache, Depends(get_response_cache)],
    lat: Annotated[float | None, Query(ge=-90, le=90)] = None,
    lng: Annotated[float | None, Query(ge=-180, le=180)] = None,
) -> BeachConditionsResponse:
    """Ranked beach clubs with Tulum Scores and a 3-day forecast.

    Args:
        lat: Caller latitude for distances (default: reference point)
        lng: Caller longitude for distances (default: reference point)

    Returns:
        Beaches sorted by score, forecast, and current weather (or null)
    """
    ttl = settings.response_cache_ttl_seconds
    response.headers["Cache-Control"] = f"public, s-maxage={ttl}"

    key = cache_key(ENDPOINT, lat=lat, lng=lng)
    cached = cache.get(key)
    if cached is not None:
        PrometheusSourceMetrics().inc_cache_hit(ENDPOINT)
        return BeachConditionsResponse.model_validate(cached)

    origin = Geo(
        lat=lat if lat is not None else settings.reference_lat,
        lon=lng if lng is not None else settings.reference_lng,
    )
    result = await build_beach_conditions(client, session, settings, origin=origin)

    cache.set(key, result.model_dump(mode="json", by_alias=True), ttl)
    return result
