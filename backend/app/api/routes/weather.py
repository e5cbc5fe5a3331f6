"""Weather Routes: GET /api/v1/weather/{cep} returns the temperature in C, F and K.

Invariants:
    - An empty cep is rejected before the use case runs (MissingParameterError, 400)
    - The use case runs under the request-scoped deadline (settings.request_timeout_sec);
      expiry cancels the in-flight lookup and raises ServiceTimeoutError (504)
    - Use case errors propagate unchanged to the global APIError handler
    - Success body: {"data": {"temp_C", "temp_F", "temp_K"}, "message": ...}

Design Decisions:
    - Thin route: validation, deadline and envelope only, the use case owns the flow
    - asyncio.wait_for over a middleware deadline: cancellation reaches the outbound
      httpx call directly, and the route still owns the response shape
"""

import asyncio
import logging

from fastapi import APIRouter, Depends

from app.api.dependencies import get_weather_use_case
from app.config import Settings, get_settings
from app.core.errors import MissingParameterError, ServiceTimeoutError
from app.schemas.envelope import Envelope
from app.schemas.weather import WeatherResult
from app.services.get_weather_by_cep import GetWeatherByCep

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/weather", tags=["weather"])

SUCCESS_MESSAGE = "Weather data retrieved successfully"


@router.get(
    "/{cep}",
    response_model=Envelope[WeatherResult],
    response_model_exclude_none=True,
)
async def get_weather_by_cep(
    cep: str,
    use_case: GetWeatherByCep = Depends(get_weather_use_case),
    settings: Settings = Depends(get_settings),
):
    """Current temperature for a Brazilian postal code."""
    logger.info("GetWeatherByCep endpoint called", extra={"cep": cep})
    if not cep:
        logger.error("CEP parameter is required")
        raise MissingParameterError(
            "CEP parameter is required",
            ["CEP parameter must be provided in the URL path"],
        )

    try:
        result = await asyncio.wait_for(
            use_case.execute(cep), timeout=settings.request_timeout_sec,
        )
    except asyncio.TimeoutError:
        logger.error(
            f"Request timeout exceeded for CEP: {cep}", extra={"cep": cep},
        )
        raise ServiceTimeoutError(
            causes=["Request exceeded the configured timeout"],
        )

    logger.info(f"{SUCCESS_MESSAGE} for CEP: {cep}", extra={"cep": cep})
    return Envelope[WeatherResult](data=result, message=SUCCESS_MESSAGE)
