"""Weather normalization and display labels.

Weather codes follow the WMO taxonomy used by Open-Meteo: 0-3 clear to
overcast, 45/48 fog, 51-65 drizzle and rain, 95+ thunderstorms.
"""

WEATHER_BASELINE = 8.0

_DASHBOARD_LABELS: dict[int, str] = {
    0: "Perfect Weather",
    1: "Perfect Weather",
    2: "Partly Cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Foggy",
    51: "Drizzle",
    53: "Drizzle",
    55: "Drizzle",
    61: "Rain",
    63: "Rain",
    65: "Heavy Rain",
    95: "Thunderstorm",
    96: "Thunderstorm",
    99: "Thunderstorm",
}

_PULSE_LABELS: dict[int, str] = {
    0: "Clear skies",
    1: "Mostly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Foggy",
    51: "Light drizzle",
    53: "Drizzle",
    55: "Heavy drizzle",
    61: "Light rain",
    63: "Rain",
    65: "Heavy rain",
    95: "Thunderstorm",
    96: "Thunderstorm",
    99: "Severe storm",
}


def weather_score(
    temperature: float | None = None,
    precipitation: float | None = None,
    wind_speed: float | None = None,
    uv_index: float | None = None,
    weather_code: int | None = None,
) -> float:
    """Convert a weather reading into a 0-10 sub-score.

    Each available signal adjusts the baseline independently; missing signals
    are skipped. The result is clamped once at the end.

    Args:
        temperature: Air temperature in C (currently not scored)
        precipitation: Precipitation probability, 0-100
        wind_speed: Wind speed in km/h
        uv_index: UV index
        weather_code: WMO weather code

    Returns:
        Sub-score in [0, 10]
    """
    score = WEATHER_BASELINE

    if weather_code is not None:
        if weather_code <= 2:
            score += 2
        elif weather_code == 3:
            pass
        elif 51 <= weather_code <= 65:
            score -= 4
        elif weather_code >= 95:
            score -= 6

    if precipitation is not None and precipitation > 50:
        score -= 3
    if wind_speed is not None and wind_speed > 30:
        score -= 2
    if uv_index is not None and uv_index > 10:
        score -= 1

    return max(0.0, min(10.0, score))


def weather_label(code: int | None) -> str:
    """Short label for the beach dashboard; a missing code reads as clear."""
    return _DASHBOARD_LABELS.get(code if code is not None else 0, "Good")


def pulse_weather_label(code: int) -> str:
    """Descriptive label for the pulse view."""
    return _PULSE_LABELS.get(code, "Fair")


def weather_emoji(code: int) -> str:
    """Icon for a weather code."""
    if code <= 1:
        return "☀️"
    if code <= 3:
        return "⛅"
    if code >= 95:
        return "⛈️"
    if code >= 61:
        return "🌧️"
    if code >= 51:
        return "🌦️"
    if code >= 45:
        return "🌫️"
    return "🌤️"


def uv_label(uv: float) -> tuple[str, str]:
    """UV exposure tier as (label, hex color)."""
    if uv <= 2:
        return ("Low", "#4CAF50")
    if uv <= 5:
        return ("Moderate", "#FFC107")
    if uv <= 7:
        return ("High", "#FF9800")
    if uv <= 10:
        return ("Very High", "#F44336")
    return ("Extreme", "#9C27B0")
