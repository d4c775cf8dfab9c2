"""Typed settings configuration - single source of truth."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database (venue directory)
    database_url: str | None = None

    # Cache
    redis_url: str | None = None
    response_cache_ttl_seconds: int = 300
    response_cache_max_entries: int = 1024

    # External APIs
    weather_base_url: str = "https://api.open-meteo.com/v1/forecast"
    marine_base_url: str = "https://marine-api.open-meteo.com/v1/marine"
    provider_timezone: str = "America/Cancun"
    http_timeout_seconds: float = 10.0

    # Reference point (Tulum town centre)
    reference_lat: float = 20.2114
    reference_lng: float = -87.4654

    # Beach zone: coastal strip east of town
    beach_zone_lat_min: float = 20.1
    beach_zone_lat_max: float = 20.23
    beach_zone_lng_min: float = -87.45
    beach_zone_lng_max: float = -87.42

    # Quintana Roo stays on UTC-5 year-round
    local_utc_offset_hours: int = -5

    # Placeholders until live feeds exist
    default_sargassum_level: str = "low"
    placeholder_has_restrooms: bool = True
    placeholder_has_showers: bool = True
    placeholder_has_food: bool = True
    placeholder_has_umbrellas: bool = True
    placeholder_has_lifeguard: bool = True
    placeholder_parking_available: bool = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
