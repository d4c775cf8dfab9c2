"""Ranking and the short-horizon forecast."""

from datetime import date, timedelta

from backend.app.models.conditions import ForecastDay, ScoredBeach
from backend.app.scoring.tulum import round_half_up

DEFAULT_BASELINE_SCORE = 8.0

# Day-over-day decay applied to today's top score. Placeholder until a live
# sargassum forecast feed is integrated.
FORECAST_DELTAS: tuple[float, ...] = (0.0, -0.2, -0.4)
FORECAST_MIN_SCORE = 5.0
FORECAST_MAX_SCORE = 10.0

_DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def rank_beaches(beaches: list[ScoredBeach]) -> list[ScoredBeach]:
    """Sort by score descending; ties keep retrieval order."""
    return sorted(beaches, key=lambda b: b.tulum_score.score, reverse=True)


def baseline_score(ranked: list[ScoredBeach]) -> float:
    """Today's baseline: the top score, or a neutral default with no venues."""
    if not ranked:
        return DEFAULT_BASELINE_SCORE
    return ranked[0].tulum_score.score


def forecast_emoji(score: float) -> str:
    if score >= 9:
        return "🌟"
    if score >= 8:
        return "⭐"
    return "✨"


def build_forecast(baseline: float, today: date) -> list[ForecastDay]:
    """Project the baseline over today and the next two days.

    Args:
        baseline: Today's top score
        today: Venue-local date for today

    Returns:
        Three ForecastDay entries, each clamped to [5, 10]
    """
    days = []
    for offset, delta in enumerate(FORECAST_DELTAS):
        day = today + timedelta(days=offset)
        value = round_half_up(baseline + delta)
        value = max(FORECAST_MIN_SCORE, min(FORECAST_MAX_SCORE, value))
        days.append(
            ForecastDay(day=_DAY_NAMES[day.weekday()], score=value, emoji=forecast_emoji(value))
        )
    return days
