"""Provenance helpers for upstream adapters."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Generic, TypeVar

from backend.app.models.common import Provenance

T = TypeVar("T")


@dataclass
class Fetched(Generic[T]):
    """Adapter result with provenance metadata."""

    value: T
    provenance: Provenance


def provenance_for_http(source: str, url: str, cache_hit: bool = False) -> Provenance:
    """Create provenance for HTTP-based results.

    Args:
        source: Source identifier (e.g., "weather.open_meteo")
        url: Full URL of the HTTP request
        cache_hit: Whether result came from cache

    Returns:
        Provenance with source=source-specific string, fetched_at=now(UTC)
    """
    return Provenance(
        source=f"source.{source}",
        ref_id=source,
        source_url=url,
        fetched_at=datetime.now(UTC),
        cache_hit=cache_hit,
    )


def provenance_for_db(source: str, table: str) -> Provenance:
    """Create provenance for database-backed results."""
    return Provenance(
        source=f"source.{source}",
        ref_id=f"{source}/{table}",
        source_url=f"db://{table}",
        fetched_at=datetime.now(UTC),
        cache_hit=False,
    )
