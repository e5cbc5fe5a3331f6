"""Boundary Protocols: contracts between the use case and the external lookup clients.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - Every outbound call is reached through one of these Protocol types
    - Implementations raise AddressLookupError / WeatherLookupError on any failure

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes need no inheritance (ADR: testable seams)
    - Async in Protocol: implementations do IO, the use case awaits them
"""

from typing import Protocol

from app.core.postal_code import PostalCode
from app.schemas.viacep import ViaCepAddress
from app.schemas.weather import WeatherReading


class AddressLookup(Protocol):
    """Resolves a postal code to an address, implemented by the shell."""
    async def get_address(self, postal_code: PostalCode) -> ViaCepAddress: ...


class WeatherLookup(Protocol):
    """Resolves a city name to current weather, implemented by the shell."""
    async def get_weather(self, city: str) -> WeatherReading: ...
