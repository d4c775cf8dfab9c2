"""Tulum Score - composite 0-10 suitability score for a beach venue.

Weights: sargassum 40%, weather 20%, crowding 20%, facilities 10%,
accessibility 10%. Pure and I/O free; unknown levels fall back to neutral
sub-scores instead of raising.
"""

import math
from enum import Enum

from backend.app.models.common import CrowdLevel, SargassumLevel
from backend.app.models.conditions import ScoreFactors, ScoringInput, TulumScoreResult
from backend.app.scoring.weather import weather_score

WEIGHTS: dict[str, float] = {
    "sargassum": 0.4,
    "weather": 0.2,
    "crowding": 0.2,
    "facilities": 0.1,
    "accessibility": 0.1,
}

SARGASSUM_SCORES: dict[str, float] = {
    SargassumLevel.none.value: 10,
    SargassumLevel.minimal.value: 9,
    SargassumLevel.low.value: 8,
    SargassumLevel.moderate.value: 6,
    SargassumLevel.medium.value: 4,
    SargassumLevel.high.value: 2,
    SargassumLevel.severe.value: 0,
}

CROWDING_SCORES: dict[str, float] = {
    CrowdLevel.empty.value: 10,
    CrowdLevel.quiet.value: 9,
    CrowdLevel.moderate.value: 7,
    CrowdLevel.busy.value: 5,
    CrowdLevel.crowded.value: 3,
    CrowdLevel.packed.value: 1,
}

DEFAULT_SARGASSUM_SCORE = 6.0
DEFAULT_CROWDING_SCORE = 7.0
FACILITIES_BASELINE = 5.0
ACCESSIBILITY_BASELINE = 7.0
PARKING_BONUS = 0.5

# (min score, rating, emoji), checked top-down
_TIERS: list[tuple[float, str, str]] = [
    (9.0, "Perfect", "🌟"),
    (8.0, "Excellent", "⭐"),
    (7.0, "Great", "✨"),
    (6.0, "Good", "💫"),
    (5.0, "Fair", "⚠️"),
]


def round_half_up(value: float) -> float:
    """Round half-up to one decimal, matching how scores are displayed."""
    return math.floor(value * 10 + 0.5) / 10


def _level_key(level: Enum | str | None) -> str | None:
    if isinstance(level, Enum):
        return str(level.value)
    return level


def facilities_score(
    has_restrooms: bool | None = None,
    has_showers: bool | None = None,
    has_food: bool | None = None,
    has_umbrellas: bool | None = None,
    has_lifeguard: bool | None = None,
) -> float:
    """Facilities sub-score.

    Beach clubs nearly always have restrooms, food and umbrellas, so those
    count unless explicitly absent; showers and lifeguards must be confirmed.
    """
    score = FACILITIES_BASELINE
    if has_restrooms is not False:
        score += 1
    if has_showers:
        score += 1
    if has_food is not False:
        score += 2
    if has_umbrellas is not False:
        score += 1
    if has_lifeguard:
        score += 1
    return min(10.0, score)


def accessibility_score(distance_km: float | None = None, parking: bool | None = None) -> float:
    """Accessibility sub-score from distance bands and parking."""
    score = ACCESSIBILITY_BASELINE
    if distance_km is not None:
        if distance_km <= 2:
            score += 3
        elif distance_km <= 5:
            score += 2
        elif distance_km <= 10:
            score += 0
        elif distance_km <= 20:
            score -= 2
        else:
            score -= 3
    if parking:
        score += PARKING_BONUS
    return max(0.0, min(10.0, score))


def score_rating(score: float) -> str:
    """User-facing rating label."""
    for threshold, rating, _ in _TIERS:
        if score >= threshold:
            return rating
    return "Skip Today"


def score_emoji(score: float) -> str:
    """User-facing emoji; everything under 6 shares the warning sign."""
    for threshold, _, emoji in _TIERS:
        if score >= threshold:
            return emoji
    return "⚠️"


def score(beach: ScoringInput) -> TulumScoreResult:
    """Compute the Tulum Score for one venue.

    Args:
        beach: Scoring inputs for the venue

    Returns:
        TulumScoreResult with the rounded score, rating, emoji and factors
    """
    factors = ScoreFactors(
        sargassum=SARGASSUM_SCORES.get(
            _level_key(beach.sargassum_level), DEFAULT_SARGASSUM_SCORE
        ),
        weather=weather_score(
            temperature=beach.temperature,
            precipitation=beach.precipitation,
            wind_speed=beach.wind_speed,
            uv_index=beach.uv_index,
            weather_code=beach.weather_code,
        ),
        crowding=CROWDING_SCORES.get(_level_key(beach.crowd_level), DEFAULT_CROWDING_SCORE),
        facilities=facilities_score(
            has_restrooms=beach.has_restrooms,
            has_showers=beach.has_showers,
            has_food=beach.has_food,
            has_umbrellas=beach.has_umbrellas,
            has_lifeguard=beach.has_lifeguard,
        ),
        accessibility=accessibility_score(
            distance_km=beach.distance_from_user,
            parking=beach.parking_available,
        ),
    )

    # Tiers use the unrounded total: 8.95 shows as 9.0 but rates "Excellent"
    total = sum(getattr(factors, name) * weight for name, weight in WEIGHTS.items())
    final = max(0.0, min(10.0, round_half_up(total)))

    return TulumScoreResult(
        score=final,
        rating=score_rating(total),
        emoji=score_emoji(total),
        factors=factors,
    )
