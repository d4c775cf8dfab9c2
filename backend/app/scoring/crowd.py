"""Time-based crowd heuristic.

There is no live occupancy feed; busyness is estimated from the local day of
week and hour alone.
"""

from datetime import datetime

from backend.app.models.common import CrowdLevel

PEAK_START_HOUR = 11
PEAK_END_HOUR = 16


def estimate_crowd_level(now: datetime) -> CrowdLevel:
    """Estimate how busy beach venues are at a venue-local time.

    Args:
        now: Venue-local wall-clock time

    Returns:
        busy on weekend peak hours, moderate on weekends or peak hours,
        quiet early morning and evening, moderate otherwise
    """
    hour = now.hour
    is_weekend = now.weekday() >= 5  # Saturday, Sunday
    is_peak = PEAK_START_HOUR <= hour <= PEAK_END_HOUR

    if is_weekend and is_peak:
        return CrowdLevel.busy
    if is_weekend or is_peak:
        return CrowdLevel.moderate
    if hour < 10 or hour > 18:
        return CrowdLevel.quiet
    return CrowdLevel.moderate
