"""WeatherAPI Client: fetches current temperature for a city over HTTP.

Invariants:
    - GET {base_url}{api_key}&q={city}, city URL-escaped with quote_plus
    - Transport error, non-200 status, non-JSON body and schema mismatch all raise
      WeatherLookupError (one failure kind)
    - The API key never appears in logs
"""

import logging
from urllib.parse import quote_plus

import httpx
from pydantic import ValidationError as SchemaValidationError

from app.core.errors import WeatherLookupError
from app.schemas.weather import WeatherReading

logger = logging.getLogger(__name__)


class WeatherApiClient:
    """WeatherLookup implementation backed by api.weatherapi.com."""

    def __init__(self, http_client: httpx.AsyncClient, base_url: str, api_key: str):
        self.http_client = http_client
        self.base_url = base_url
        self.api_key = api_key

    def build_url(self, city: str) -> str:
        return f"{self.base_url}{self.api_key}&q={quote_plus(city)}"

    async def get_weather(self, city: str) -> WeatherReading:
        try:
            response = await self.http_client.get(self.build_url(city))
        except httpx.HTTPError as e:
            # httpx errors embed the request URL, which carries the key
            logger.warning(
                f"WeatherAPI request failed: {type(e).__name__}",
                extra={"city": city},
            )
            raise WeatherLookupError(f"transport error: {type(e).__name__}") from e

        if response.status_code != 200:
            logger.warning(
                f"WeatherAPI returned status {response.status_code}",
                extra={"city": city, "status_code": response.status_code},
            )
            raise WeatherLookupError("failed to fetch weather data")

        try:
            return WeatherReading.model_validate(response.json())
        except (ValueError, SchemaValidationError) as e:
            logger.warning(
                f"WeatherAPI body could not be decoded: {e}",
                extra={"city": city},
            )
            raise WeatherLookupError(f"invalid response body: {e}") from e
