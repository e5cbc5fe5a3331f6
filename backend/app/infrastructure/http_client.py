"""Outbound HTTP Client Manager: one pooled httpx.AsyncClient per process.

Invariants:
    - A single AsyncClient is shared by every lookup client (connection reuse)
    - Created and closed by the FastAPI lifespan, never at import time
    - Read-only after startup: requests never reconfigure it
    - No connect/read/write/pool timeout of its own: a slow but valid upstream
      answer inside the request deadline succeeds, and deadline expiry (504)
      is the only timeout outcome

Design Decisions:
    - Singleton manager initialized on startup: lifespan manages lifecycle
      (ADR: no global import side effects)
    - httpx over requests: async, cancellable by the request-scoped deadline
"""

import logging

import httpx

logger = logging.getLogger(__name__)


class HttpClientManager:
    """Owns the shared AsyncClient used for ViaCEP and WeatherAPI calls."""

    def __init__(self):
        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(None),
            headers={"Accept": "application/json"},
        )

    async def close(self) -> None:
        await self.client.aclose()
        logger.info("Outbound HTTP client closed")


# Singleton (initialized on startup)
http_manager: HttpClientManager | None = None


def init_http_client() -> HttpClientManager:
    global http_manager
    http_manager = HttpClientManager()
    return http_manager


async def close_http_client() -> None:
    global http_manager
    if http_manager is not None:
        await http_manager.close()
        http_manager = None


def get_http_client() -> httpx.AsyncClient:
    """FastAPI dependency for the shared outbound client."""
    if not http_manager:
        raise RuntimeError("HTTP client not initialized")
    return http_manager.client
