"""Health check endpoints.

- /health: liveness, always 200
- /healthz: venue directory and Redis readiness
"""

from typing import Any

import redis
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.config import Settings, get_settings
from backend.app.db.engine import get_async_engine
from backend.app.db.models import VenueRow

router = APIRouter()


async def check_db(settings: Settings) -> tuple[bool, str]:
    """Check that the venue directory is reachable and has its table.

    Returns:
        (is_ok, status_message)
    """
    if not settings.database_url:
        return (False, "not_configured")

    try:
        async with AsyncSession(get_async_engine()) as session:
            await session.scalar(select(func.count()).select_from(VenueRow))
        return (True, "ok")
    except Exception as e:
        return (False, f"error: {type(e).__name__}")


async def check_redis(settings: Settings) -> tuple[bool, str]:
    """Check the response-cache Redis; an unconfigured Redis is fine.

    Returns:
        (is_ok, status_message)
    """
    if not settings.redis_url:
        return (True, "not_configured")

    try:
        client = redis.from_url(settings.redis_url, decode_responses=True)  # type: ignore[no-untyped-call]
        client.ping()
        return (True, "ok")
    except Exception as e:
        return (False, f"error: {type(e).__name__}")


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}


@router.get("/healthz", response_model=None)
async def healthz() -> dict[str, Any] | JSONResponse:
    """Readiness probe: 200 when the directory and cache are usable, else 503."""
    settings = get_settings()

    db_ok, db_status = await check_db(settings)
    redis_ok, redis_status = await check_redis(settings)

    body: dict[str, Any] = {
        "status": "ok" if db_ok and redis_ok else "degraded",
        "components": {"db": db_status, "redis": redis_status},
    }
    if body["status"] != "ok":
        return JSONResponse(status_code=503, content=body)
    return body
