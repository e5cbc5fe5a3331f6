"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process
    - Settings are frozen: built once at startup, passed by reference to collaborators

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults provided for all non-secret settings: works out-of-the-box locally
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, frozen=True, extra="ignore",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    env: str = "development"
    shutdown_timeout_seconds: int = 30

    # Request-scoped deadline for the whole validate → respond sequence
    request_timeout_sec: float = 300

    # ViaCEP
    viacep_base_url: str = "https://viacep.com.br/ws/"

    # WeatherAPI: key is appended to the base, so the base ends in "key="
    weather_base_url: str = "http://api.weatherapi.com/v1/current.json?key="
    weather_api_key: str = ""

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("viacep_base_url", "weather_base_url")
    @classmethod
    def ensure_url_suffix(cls, v: str) -> str:
        """Base URLs are concatenated, not joined: they must end in / or =."""
        if v and not v.endswith(("/", "=")):
            return v + "/"
        return v

    @property
    def is_production(self) -> bool:
        return self.env.lower() == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()
