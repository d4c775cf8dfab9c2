"""Beach scoring: weather normalization, crowd heuristic, Tulum Score, ranking."""

from backend.app.scoring.crowd import estimate_crowd_level
from backend.app.scoring.ranking import baseline_score, build_forecast, rank_beaches
from backend.app.scoring.tulum import WEIGHTS, score
from backend.app.scoring.weather import weather_score

__all__ = [
    "WEIGHTS",
    "baseline_score",
    "build_forecast",
    "estimate_crowd_level",
    "rank_beaches",
    "score",
    "weather_score",
]
