"""Root conftest: shared test configuration."""

import os

# Ensure tests never reach the real upstream services with a real key
os.environ.setdefault("WEATHER_API_KEY", "test-weather-key")
os.environ.setdefault("VIACEP_BASE_URL", "http://viacep.test/ws/")
os.environ.setdefault(
    "WEATHER_BASE_URL", "http://weather.test/v1/current.json?key=",
)
os.environ.setdefault("LOG_FORMAT", "text")
