"""CEP Weather API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map APIError → uniform {data, message, causes} envelope
    - Outbound HTTP client created on startup and closed on shutdown via lifespan
    - SIGINT/SIGTERM trigger uvicorn's graceful shutdown, bounded by
      settings.shutdown_timeout_seconds

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Four error handler layers: APIError (domain), RequestValidationError
      (Pydantic), HTTPException (routing), Exception (catch-all)
    - Request log middleware replaces the web framework's access log: one JSON
      line per request with status_code and duration_ms
"""

import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request

from app.api.error_handlers import register_error_handlers
from app.api.routes import health, weather
from app.config import get_settings
from app.infrastructure.http_client import close_http_client, init_http_client
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_http_client()
    if settings.is_production and not settings.weather_api_key:
        logger.warning("WEATHER_API_KEY is empty: every weather lookup will fail")
    logger.info(f"CEP Weather API started (env={settings.env})")
    yield
    await close_http_client()
    logger.info("CEP Weather API shutting down")


app = FastAPI(
    title="CEP Weather API", version="1.0.0", lifespan=lifespan,
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(weather.router)

register_error_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Access log: method, path, status and latency for every request."""
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        # Unhandled errors reach the catch-all handler as a 500 after this re-raise
        _log_access(request, 500, started)
        raise
    _log_access(request, response.status_code, started)
    return response


def _log_access(request: Request, status_code: int, started: float) -> None:
    logger.info(
        f"{request.method} {request.url.path} {status_code}",
        extra={
            "path": request.url.path,
            "status_code": status_code,
            "duration_ms": round((time.perf_counter() - started) * 1000, 2),
        },
    )


def run() -> None:
    """Process entry point: serve the app until SIGINT/SIGTERM."""
    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        access_log=False,
        log_config=None,
        timeout_graceful_shutdown=settings.shutdown_timeout_seconds,
    )


if __name__ == "__main__":
    run()
