"""Common types and enums shared across all models."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for response models serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Geo(BaseModel):
    """Geographic coordinates (WGS84)."""

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class SargassumLevel(str, Enum):
    """Seaweed accumulation severity, best to worst."""

    none = "none"
    minimal = "minimal"
    low = "low"
    moderate = "moderate"
    medium = "medium"
    high = "high"
    severe = "severe"


class CrowdLevel(str, Enum):
    """Heuristic busyness, emptiest to fullest."""

    empty = "empty"
    quiet = "quiet"
    moderate = "moderate"
    busy = "busy"
    crowded = "crowded"
    packed = "packed"


class TimeSegment(str, Enum):
    """Local time-of-day bucket used by the pulse view."""

    morning = "morning"
    midday = "midday"
    afternoon = "afternoon"
    evening = "evening"
    night = "night"


class Provenance(BaseModel):
    """Provenance metadata for upstream source results."""

    source: str  # e.g. "source.weather.open_meteo", "source.venues.db"
    ref_id: str | None = None
    source_url: str | None = None
    fetched_at: datetime
    cache_hit: bool | None = None
