"""API test fixtures: ASGI test client with the use case wired to lookup fakes.

Invariants:
    - No outbound HTTP: get_weather_use_case overridden with AsyncMock lookups
    - Overrides cleared after every test

Design Decisions:
    - raise_app_exceptions=False: the catch-all handler's 500 response is what
      a real client sees, Starlette still re-raises it to the server
"""

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from app.api.dependencies import get_weather_use_case
from app.main import app
from app.schemas.viacep import ViaCepAddress
from app.schemas.weather import WeatherReading
from app.services.get_weather_by_cep import GetWeatherByCep


@pytest.fixture
def address_lookup():
    fake = AsyncMock()
    fake.get_address.return_value = ViaCepAddress(
        cep="12345-678", street="Rua Teste", district="Centro",
        city="São Paulo", state="SP",
    )
    return fake


@pytest.fixture
def weather_lookup():
    fake = AsyncMock()
    fake.get_weather.return_value = WeatherReading.model_validate({
        "location": {"name": "São Paulo", "region": "Sao Paulo", "country": "Brazil"},
        "current": {"temp_c": 25.5, "temp_f": 77.9},
    })
    return fake


@pytest.fixture
def use_case(address_lookup, weather_lookup):
    return GetWeatherByCep(address_lookup, weather_lookup)


@pytest.fixture
async def client(use_case):
    """FastAPI test client with the use case dependency overridden."""
    app.dependency_overrides[get_weather_use_case] = lambda: use_case

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
