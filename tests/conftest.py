"""Shared pytest fixtures for all test suites."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from backend.app.config import Settings
from backend.app.db.seed_dev import seed_dev_venues


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults only (no .env)."""
    return Settings(_env_file=None, database_url="sqlite+aiosqlite:///:memory:")  # type: ignore[call-arg]


@pytest_asyncio.fixture
async def venue_engine() -> AsyncGenerator[AsyncEngine, None]:
    """In-memory venue directory seeded with the dev venues.

    StaticPool keeps a single connection so the in-memory database survives
    across sessions.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        echo=False,
    )
    await seed_dev_venues(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def venue_session(venue_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Session on the seeded venue directory."""
    async with AsyncSession(venue_engine) as session:
        yield session
