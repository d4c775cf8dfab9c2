"""Marine adapter: sea-surface temperature from the Open-Meteo marine API."""

import httpx
from pydantic import BaseModel

from backend.app.adapters.provenance import Fetched, provenance_for_http
from backend.app.models.common import Geo
from backend.app.models.readings import MarineReading


class OpenMeteoMarineCurrent(BaseModel):
    time: str | None = None
    sea_surface_temperature: float | None = None


class OpenMeteoMarine(BaseModel):
    """Marine body; anything else fails validation."""

    current: OpenMeteoMarineCurrent | None = None


async def fetch_marine(
    location: Geo,
    client: httpx.AsyncClient,
    base_url: str = "https://marine-api.open-meteo.com/v1/marine",
    timezone: str = "America/Cancun",
) -> Fetched[MarineReading]:
    """Fetch current sea-surface temperature.

    Raises:
        httpx.HTTPError: On network or HTTP errors
        ValueError: If the body is not JSON or not a marine payload
    """
    params: dict[str, str | float] = {
        "latitude": location.lat,
        "longitude": location.lon,
        "current": "sea_surface_temperature",
        "timezone": timezone,
    }
    url = f"{base_url}?{'&'.join(f'{k}={v}' for k, v in params.items())}"

    response = await client.get(base_url, params=params)
    response.raise_for_status()
    payload = OpenMeteoMarine.model_validate(response.json())
    current = payload.current or OpenMeteoMarineCurrent()

    return Fetched(
        value=MarineReading(sea_surface_temperature=current.sea_surface_temperature),
        provenance=provenance_for_http(source="marine.open_meteo", url=url),
    )
