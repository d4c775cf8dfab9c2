"""Models package - re-exports for convenience."""

from backend.app.models.common import (
    CrowdLevel,
    Geo,
    Provenance,
    SargassumLevel,
    TimeSegment,
)
from backend.app.models.conditions import (
    BeachConditionsResponse,
    ForecastDay,
    ScoredBeach,
    ScoreFactors,
    ScoringInput,
    TulumScoreResult,
    WeatherSummary,
)
from backend.app.models.pulse import PulseResponse, PulseWeather, SunTimes, TopBeach
from backend.app.models.readings import (
    CurrentWeather,
    DailyWeather,
    MarineReading,
    Venue,
    WeatherReading,
)

__all__ = [
    # Common
    "Geo",
    "Provenance",
    "SargassumLevel",
    "CrowdLevel",
    "TimeSegment",
    # Scoring
    "ScoringInput",
    "ScoreFactors",
    "TulumScoreResult",
    # Beach conditions
    "ScoredBeach",
    "ForecastDay",
    "WeatherSummary",
    "BeachConditionsResponse",
    # Pulse
    "PulseResponse",
    "PulseWeather",
    "SunTimes",
    "TopBeach",
    # Upstream results
    "CurrentWeather",
    "DailyWeather",
    "WeatherReading",
    "MarineReading",
    "Venue",
]
