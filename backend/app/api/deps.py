"""Shared FastAPI dependencies."""

from collections.abc import AsyncGenerator

import httpx

from backend.app.config import get_settings


async def get_http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """Request-scoped HTTP client for upstream providers.

    Upstream timeouts live here, not in the scoring logic.
    """
    settings = get_settings()
    async with httpx.AsyncClient(timeout=settings.http_timeout_seconds) as client:
        yield client
