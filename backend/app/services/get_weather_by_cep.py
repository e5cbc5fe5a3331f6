"""Get Weather By CEP: orchestrates validate → address lookup → weather lookup → compute.

Invariants:
    - Four linear states, none revisited: Validate, LookupAddress, LookupWeather, Compute
    - Every collaborator failure is reclassified into exactly one use case error:
        invalid shape      → InvalidZipcodeError (422)
        any address error  → ZipcodeNotFoundError (404)
        any weather error  → WeatherServiceError (502)
    - Raw transport errors never escape this module: any exception raised by a
      lookup (not only the documented lookup errors) is reclassified
    - Logging is informational only, it never changes control flow

Design Decisions:
    - Collaborators injected as Protocols: tests substitute fakes (ADR: explicit seams)
    - Lookup failures are folded, not distinguished: a network error while resolving
      the CEP is reported as "can not find zipcode" (ADR: stable
      caller-facing contract, diagnostics go to the logs)
    - CancelledError (BaseException) passes through uncaught: the request-scoped
      deadline cancels the in-flight lookup
"""

import logging

from app.core.errors import (
    AddressLookupError,
    InvalidFormatError,
    InvalidZipcodeError,
    WeatherLookupError,
    WeatherServiceError,
    ZipcodeNotFoundError,
)
from app.core.lookup_protocols import AddressLookup, WeatherLookup
from app.core.postal_code import PostalCode
from app.core.temperature import celsius_to_kelvin
from app.schemas.weather import WeatherResult

logger = logging.getLogger(__name__)


def _reason(exc: Exception) -> str:
    """Diagnostic text for a lookup failure (logged, never returned to the caller)."""
    if isinstance(exc, (AddressLookupError, WeatherLookupError)):
        return exc.reason
    return repr(exc)


class GetWeatherByCep:
    """Use case: current temperature, in three units, for a postal code."""

    def __init__(self, address_lookup: AddressLookup, weather_lookup: WeatherLookup):
        self.address_lookup = address_lookup
        self.weather_lookup = weather_lookup

    async def execute(self, raw_cep: str) -> WeatherResult:
        logger.debug(
            f"Executing get weather by cep use case for CEP: {raw_cep}",
            extra={"cep": raw_cep},
        )

        try:
            postal_code = PostalCode(raw_cep)
        except InvalidFormatError:
            logger.error(f"Invalid CEP format: {raw_cep}", extra={"cep": raw_cep})
            raise InvalidZipcodeError()

        try:
            address = await self.address_lookup.get_address(postal_code)
        except Exception as e:
            logger.error(
                f"Error fetching address for CEP {postal_code}: {_reason(e)}",
                extra={"cep": str(postal_code)},
            )
            raise ZipcodeNotFoundError() from e
        logger.info(
            f"Address found for CEP {postal_code}: {address.city}, {address.state}",
            extra={"cep": str(postal_code), "city": address.city},
        )

        try:
            reading = await self.weather_lookup.get_weather(address.city)
        except Exception as e:
            logger.error(
                f"Error fetching weather for city {address.city}: {_reason(e)}",
                extra={"cep": str(postal_code), "city": address.city},
            )
            raise WeatherServiceError() from e
        logger.info(
            f"Weather data found for city {address.city}: {reading.current.temp_c:.1f}°C",
            extra={"cep": str(postal_code), "city": address.city},
        )

        return WeatherResult(
            temp_C=reading.current.temp_c,
            temp_F=reading.current.temp_f,
            temp_K=celsius_to_kelvin(reading.current.temp_c),
        )
