"""Venue-local time helpers.

Quintana Roo does not observe DST, so local time is a fixed UTC offset.
"""

from datetime import UTC, datetime, timedelta, timezone

from backend.app.models.common import TimeSegment


def local_now(utc_offset_hours: int, now: datetime | None = None) -> datetime:
    """Current venue-local time as an aware datetime."""
    tz = timezone(timedelta(hours=utc_offset_hours))
    if now is None:
        now = datetime.now(UTC)
    return now.astimezone(tz)


def time_segment(hour: int) -> TimeSegment:
    """Bucket a local hour into a time-of-day segment."""
    if 6 <= hour < 10:
        return TimeSegment.morning
    if 10 <= hour < 14:
        return TimeSegment.midday
    if 14 <= hour < 18:
        return TimeSegment.afternoon
    if 18 <= hour < 22:
        return TimeSegment.evening
    return TimeSegment.night


def format_local_time(iso_value: str | None) -> str | None:
    """Format a provider local timestamp ("2025-12-01T06:12") as "6:12 AM".

    Open-Meteo already returns these in the requested timezone, so no
    conversion is applied.
    """
    if not iso_value:
        return None
    try:
        parsed = datetime.fromisoformat(iso_value)
    except ValueError:
        return None
    hour12 = parsed.hour % 12 or 12
    suffix = "AM" if parsed.hour < 12 else "PM"
    return f"{hour12}:{parsed.minute:02d} {suffix}"
