"""Tests for beach-conditions and pulse assembly over settled sources."""

import pytest

from backend.app.conditions.aggregator import (
    VenueDirectoryError,
    assemble_beach_conditions,
    assemble_pulse,
    beach_clubs,
)
from backend.app.conditions.sources import MARINE, VENUES, WEATHER, SourceBundle, SourceResult
from backend.app.config import Settings
from backend.app.models.common import Geo, TimeSegment
from backend.app.models.readings import (
    CurrentWeather,
    DailyWeather,
    MarineReading,
    Venue,
    WeatherReading,
)
from tests.helpers import local_dt

# Monday 08:00 local: quiet crowd
MONDAY_MORNING = local_dt(2025, 12, 1, 8)
NEAR_PAPAYA = Geo(lat=20.18, lon=-87.44)

VENUES_FIXTURE = [
    Venue(id="1", place_id="p-papaya", name="Papaya Playa Project", category="club", lat=20.1835, lng=-87.4431),
    Venue(id="2", place_id="p-taboo", name="Taboo Beach Club", category="club", lat=20.1592, lng=-87.4450),
    Venue(id="3", place_id="p-town", name="Town Club", category="club", lat=20.2125, lng=-87.4625),
    Venue(id="4", place_id="p-food", name="Beach Taqueria", category="restaurant", lat=20.18, lng=-87.44),
]

WEATHER_READING = WeatherReading(
    current=CurrentWeather(
        temperature=28.4,
        apparent_temperature=31.6,
        relative_humidity=70,
        weather_code=1,
        wind_speed=12.3,
    ),
    today=DailyWeather(uv_index_max=9.5, sunrise="2025-12-01T06:12", sunset="2025-12-01T17:21"),
    precipitation_probability=10,
)


def _bundle(
    weather_ok: bool = True,
    marine_ok: bool = True,
    venues_ok: bool = True,
) -> SourceBundle:
    return SourceBundle(
        weather=SourceResult(source=WEATHER, value=WEATHER_READING)
        if weather_ok
        else SourceResult(source=WEATHER, error="http_500: down"),
        marine=SourceResult(source=MARINE, value=MarineReading(sea_surface_temperature=27.6))
        if marine_ok
        else SourceResult(source=MARINE, error="ConnectError: refused"),
        venues=SourceResult(source=VENUES, value=list(VENUES_FIXTURE))
        if venues_ok
        else SourceResult(source=VENUES, error="OperationalError: no such table"),
    )


def test_beach_clubs_filters_category_and_zone(settings: Settings) -> None:
    clubs = beach_clubs(VENUES_FIXTURE, settings)
    assert [c.id for c in clubs] == ["1", "2"]


def test_beach_conditions_scores_and_ranks(settings: Settings) -> None:
    response = assemble_beach_conditions(_bundle(), settings, NEAR_PAPAYA, MONDAY_MORNING)

    assert [b.name for b in response.beaches] == ["Papaya Playa Project", "Taboo Beach Club"]
    top = response.beaches[0]
    assert top.tulum_score.score == 9.0
    assert top.tulum_score.rating == "Perfect"
    assert top.tulum_score.factors.weather == 10
    assert top.tulum_score.factors.crowding == 9
    assert top.crowd_level == "quiet"
    assert top.sargassum_level == "low"
    assert top.weather_label == "Perfect Weather"
    assert top.distance == pytest.approx(0.5, abs=0.1)

    scores = [b.tulum_score.score for b in response.beaches]
    assert scores == sorted(scores, reverse=True)

    assert response.weather is not None
    assert response.weather.temp == 28.4
    assert response.weather.code == 1
    assert response.weather.wind_speed == 12.3


def test_beach_conditions_forecast_from_top_score(settings: Settings) -> None:
    response = assemble_beach_conditions(_bundle(), settings, NEAR_PAPAYA, MONDAY_MORNING)

    assert len(response.forecast) == 3
    assert [d.day for d in response.forecast] == ["Mon", "Tue", "Wed"]
    assert [d.score for d in response.forecast] == [9.0, 8.8, 8.6]


def test_weather_failure_degrades_to_baseline(settings: Settings) -> None:
    """Without weather every venue is still scored on the baseline."""
    response = assemble_beach_conditions(
        _bundle(weather_ok=False), settings, NEAR_PAPAYA, MONDAY_MORNING
    )

    assert response.weather is None
    assert len(response.beaches) == 2
    for beach in response.beaches:
        assert beach.tulum_score.factors.weather == 8.0
    assert response.beaches[0].tulum_score.score == 8.6
    assert response.beaches[0].tulum_score.rating == "Excellent"


def test_venue_failure_is_fatal(settings: Settings) -> None:
    with pytest.raises(VenueDirectoryError, match="Venue directory unavailable"):
        assemble_beach_conditions(_bundle(venues_ok=False), settings, NEAR_PAPAYA, MONDAY_MORNING)


def test_no_qualifying_venues_uses_default_forecast(settings: Settings) -> None:
    bundle = _bundle()
    bundle.venues = SourceResult(source=VENUES, value=[VENUES_FIXTURE[3]])

    response = assemble_beach_conditions(bundle, settings, NEAR_PAPAYA, MONDAY_MORNING)

    assert response.beaches == []
    assert [d.score for d in response.forecast] == [8.0, 7.8, 7.6]


def test_pulse_summary(settings: Settings) -> None:
    pulse = assemble_pulse(_bundle(), settings, MONDAY_MORNING)

    assert pulse.time_segment == TimeSegment.morning
    assert pulse.hour == 8
    assert pulse.sargassum_level == "low"

    assert pulse.weather is not None
    assert pulse.weather.temp == 28
    assert pulse.weather.feels_like == 32
    assert pulse.weather.wind_speed == 12
    assert pulse.weather.label == "Mostly clear"
    assert pulse.weather.emoji == "☀️"
    assert pulse.weather.uv_index == 9.5
    assert pulse.weather.uv_label == "Very High"
    assert pulse.weather.uv_color == "#F44336"
    assert pulse.weather.water_temp == 28

    assert pulse.sun.sunrise == "6:12 AM"
    assert pulse.sun.sunset == "5:21 PM"
    assert pulse.sun.sunset_iso == "2025-12-01T17:21"

    assert pulse.top_beach is not None
    assert pulse.top_beach.name == "Papaya Playa Project"
    assert pulse.top_beach.rating == "Excellent"
    assert pulse.top_beach.crowd == "quiet"


def test_pulse_marine_failure_omits_water_temp(settings: Settings) -> None:
    pulse = assemble_pulse(_bundle(marine_ok=False), settings, MONDAY_MORNING)

    assert pulse.weather is not None
    assert pulse.weather.water_temp is None
    assert pulse.weather.temp == 28


def test_pulse_weather_failure(settings: Settings) -> None:
    pulse = assemble_pulse(_bundle(weather_ok=False), settings, MONDAY_MORNING)

    assert pulse.weather is None
    assert pulse.sun.sunrise is None
    assert pulse.sun.sunset is None
    assert pulse.top_beach is not None


def test_pulse_venue_failure_is_fatal(settings: Settings) -> None:
    with pytest.raises(VenueDirectoryError):
        assemble_pulse(_bundle(venues_ok=False), settings, MONDAY_MORNING)


def test_pulse_serializes_camel_case(settings: Settings) -> None:
    body = assemble_pulse(_bundle(), settings, MONDAY_MORNING).model_dump(mode="json", by_alias=True)

    assert body["timeSegment"] == "morning"
    assert body["topBeach"]["name"] == "Papaya Playa Project"
    assert body["weather"]["waterTemp"] == 28
    assert body["weather"]["feelsLike"] == 32
    assert body["sun"]["sunsetISO"] == "2025-12-01T17:21"
