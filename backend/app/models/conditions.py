"""Scoring input/output and beach-conditions response models."""

from pydantic import BaseModel

from backend.app.models.common import CamelModel, CrowdLevel, SargassumLevel


class ScoringInput(BaseModel):
    """Per-venue inputs to the composite scorer.

    Built fresh for every request. Enum fields also accept raw strings so an
    unrecognised level degrades to the neutral sub-score instead of failing.
    """

    sargassum_level: SargassumLevel | str | None = None
    crowd_level: CrowdLevel | str | None = None

    # Weather (any may be missing when the provider is down)
    temperature: float | None = None
    precipitation: float | None = None
    wind_speed: float | None = None
    uv_index: float | None = None
    weather_code: int | None = None

    # Facilities
    has_restrooms: bool | None = None
    has_showers: bool | None = None
    has_food: bool | None = None
    has_umbrellas: bool | None = None
    has_lifeguard: bool | None = None

    # Accessibility
    distance_from_user: float | None = None
    parking_available: bool | None = None
    public_transport_nearby: bool | None = None
    walkable: bool | None = None


class ScoreFactors(BaseModel):
    """Weighted sub-scores, each 0-10."""

    sargassum: float
    weather: float
    crowding: float
    facilities: float
    accessibility: float


class TulumScoreResult(BaseModel):
    """Composite beach score."""

    score: float
    rating: str
    emoji: str
    factors: ScoreFactors


class ScoredBeach(CamelModel):
    """A venue with its distance and score."""

    id: str
    place_id: str | None = None
    name: str
    lat: float
    lng: float
    distance: float
    sargassum_level: str
    crowd_level: str
    weather_label: str
    tulum_score: TulumScoreResult
    photo_url: str | None = None
    url: str | None = None


class ForecastDay(CamelModel):
    """One day of the placeholder forecast."""

    day: str
    score: float
    emoji: str


class WeatherSummary(CamelModel):
    """Current weather echoed back to the dashboard."""

    temp: float | None
    code: int | None
    wind_speed: float | None


class BeachConditionsResponse(CamelModel):
    """GET /beach-conditions payload."""

    beaches: list[ScoredBeach]
    forecast: list[ForecastDay]
    weather: WeatherSummary | None
