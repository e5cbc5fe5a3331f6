"""Route Dependencies: wires settings and the shared HTTP client into the use case.

Invariants:
    - Collaborators built per request from read-only startup state
    - Tests override get_weather_use_case to inject fakes (no outbound calls)

Design Decisions:
    - FastAPI Depends over a DI container: explicit, overridable, no magic (ADR: explicit wiring)
"""

import httpx
from fastapi import Depends

from app.config import Settings, get_settings
from app.infrastructure.http_client import get_http_client
from app.infrastructure.viacep_client import ViaCepClient
from app.infrastructure.weather_client import WeatherApiClient
from app.services.get_weather_by_cep import GetWeatherByCep


def get_address_lookup(
    http_client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> ViaCepClient:
    return ViaCepClient(http_client, settings.viacep_base_url)


def get_weather_lookup(
    http_client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> WeatherApiClient:
    return WeatherApiClient(
        http_client, settings.weather_base_url, settings.weather_api_key,
    )


def get_weather_use_case(
    address_lookup: ViaCepClient = Depends(get_address_lookup),
    weather_lookup: WeatherApiClient = Depends(get_weather_lookup),
) -> GetWeatherByCep:
    return GetWeatherByCep(address_lookup, weather_lookup)
