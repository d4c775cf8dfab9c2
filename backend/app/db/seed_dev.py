"""Dev seeding helper for the venue directory."""

import asyncio

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from backend.app.db.engine import get_async_engine
from backend.app.db.models import Base, VenueRow

# Beach clubs along the hotel-zone strip, plus an in-town club and a restaurant
# that the aggregator must filter out.
DEV_VENUES: list[dict[str, object]] = [
    {"name": "Papaya Playa Project", "category": "club", "lat": 20.1835, "lng": -87.4431},
    {"name": "Taboo Beach Club", "category": "club", "lat": 20.1592, "lng": -87.4450},
    {"name": "Vagalume", "category": "club", "lat": 20.1661, "lng": -87.4467},
    {"name": "Ziggy Beach", "category": "club", "lat": 20.2014, "lng": -87.4297},
    {"name": "Bonbonniere", "category": "club", "lat": 20.2060, "lng": -87.4321},
    {"name": "La Santanera", "category": "club", "lat": 20.2125, "lng": -87.4625},
    {"name": "Hartwood", "category": "restaurant", "lat": 20.1460, "lng": -87.4620},
]


def to_place_id(name: str) -> str:
    """Stable slug used as the dev place_id."""
    slug = "".join(c if c.isalnum() else "-" for c in name.lower())
    while "--" in slug:
        slug = slug.replace("--", "-")
    return f"tulum-{slug.strip('-')}"


async def seed_dev_venues(engine: AsyncEngine | None = None) -> int:
    """Seed dev venues.

    This function is idempotent - safe to run multiple times.

    Returns:
        Number of venues inserted
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    inserted = 0
    async with AsyncSession(engine) as session:
        for venue in DEV_VENUES:
            place_id = to_place_id(str(venue["name"]))
            result = await session.execute(select(VenueRow).where(VenueRow.place_id == place_id))
            if result.scalar_one_or_none() is not None:
                continue
            session.add(VenueRow(place_id=place_id, **venue))
            inserted += 1
        await session.commit()

    return inserted


if __name__ == "__main__":
    count = asyncio.run(seed_dev_venues())
    print(f"✅ Dev seeding complete ({count} venues inserted)")
