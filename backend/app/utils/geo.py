"""Geographic helpers: great-circle distance and the beach-zone filter."""

import math

from backend.app.config import Settings

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two points in kilometres."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def is_in_beach_zone(lat: float, lng: float, settings: Settings) -> bool:
    """Whether a point lies in the coastal strip (bounds inclusive)."""
    return (
        settings.beach_zone_lat_min <= lat <= settings.beach_zone_lat_max
        and settings.beach_zone_lng_min <= lng <= settings.beach_zone_lng_max
    )
