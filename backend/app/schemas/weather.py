"""Weather Schemas: upstream WeatherAPI payload and the three-unit API result.

Invariants:
    - WeatherReading requires current.temp_c and current.temp_f, everything else optional
    - WeatherResult serializes with the exact keys temp_C, temp_F, temp_K

Design Decisions:
    - Upstream models ignore unknown fields: WeatherAPI returns far more than we read
"""

from pydantic import BaseModel, ConfigDict


class WeatherLocation(BaseModel):
    name: str = ""
    region: str = ""
    country: str = ""


class WeatherCondition(BaseModel):
    text: str = ""


class CurrentWeather(BaseModel):
    """Current conditions block of a WeatherAPI response."""
    temp_c: float
    temp_f: float
    condition: WeatherCondition = WeatherCondition()


class WeatherReading(BaseModel):
    """Decoded WeatherAPI current.json response."""

    model_config = ConfigDict(frozen=True)

    location: WeatherLocation = WeatherLocation()
    current: CurrentWeather


class WeatherResult(BaseModel):
    """Temperature in Celsius, Fahrenheit and Kelvin."""

    model_config = ConfigDict(frozen=True)

    temp_C: float
    temp_F: float
    temp_K: float
