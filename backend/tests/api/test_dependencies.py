"""Route Dependencies: the real wiring builds clients from settings and the shared AsyncClient."""

import httpx

from app.api.dependencies import (
    get_address_lookup,
    get_weather_lookup,
    get_weather_use_case,
)
from app.config import Settings
from app.infrastructure.viacep_client import ViaCepClient
from app.infrastructure.weather_client import WeatherApiClient
from app.services.get_weather_by_cep import GetWeatherByCep


async def test_wiring_uses_settings_and_shared_client():
    settings = Settings(
        _env_file=None,
        viacep_base_url="http://viacep.local/ws/",
        weather_base_url="http://weather.local/current.json?key=",
        weather_api_key="k",
    )
    async with httpx.AsyncClient() as http_client:
        address_lookup = get_address_lookup(http_client, settings)
        weather_lookup = get_weather_lookup(http_client, settings)
        use_case = get_weather_use_case(address_lookup, weather_lookup)

    assert isinstance(address_lookup, ViaCepClient)
    assert address_lookup.http_client is http_client
    assert address_lookup.base_url == "http://viacep.local/ws/"
    assert isinstance(weather_lookup, WeatherApiClient)
    assert weather_lookup.build_url("Recife") == "http://weather.local/current.json?key=k&q=Recife"
    assert isinstance(use_case, GetWeatherByCep)
    assert use_case.address_lookup is address_lookup
