"""Venue directory adapter backed by the venues table."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.adapters.provenance import Fetched, provenance_for_db
from backend.app.db.models import VenueRow
from backend.app.models.readings import Venue


async def fetch_venues(session: AsyncSession) -> Fetched[list[Venue]]:
    """Load every venue in the directory.

    Category and beach-zone filtering happen in the aggregator, matching the
    directory's get-all contract.

    Raises:
        sqlalchemy.exc.SQLAlchemyError: On database errors
    """
    result = await session.execute(select(VenueRow).order_by(VenueRow.name))
    venues = [
        Venue(
            id=row.id,
            place_id=row.place_id,
            name=row.name,
            category=row.category,
            lat=row.lat,
            lng=row.lng,
            rating=row.rating,
            photo_url=row.photo_url,
            website=row.website,
        )
        for row in result.scalars()
    ]
    return Fetched(value=venues, provenance=provenance_for_db("venues.db", "venues"))
