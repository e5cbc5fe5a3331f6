"""Error Handlers: global exception handlers mapping failures to the uniform envelope.

Invariants:
    - APIError → exc.http_status with {data: null, message, causes}; the kind is never reinterpreted
    - RequestValidationError → 400 with field-level causes
    - Routing errors (404/405 from Starlette) → same envelope, routing status kept
    - Exception (catch-all) → 500 with the raw error text folded into causes;
      the process keeps serving

Design Decisions:
    - Four-layer handler: domain (APIError), validation (Pydantic), routing (Starlette), catch-all
    - Extracted from main.py (ADR: import fan-out < 10)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import APIError, InternalError, ValidationError

logger = logging.getLogger(__name__)

UNHANDLED_ERROR_MESSAGE = "Failed to get weather data"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_exception_handler(app)
    _register_generic_error_handler(app)


def _register_api_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError):
        """Handle all classified API errors."""
        logger.error(
            f"APIError ({exc.category.value}): {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_http_exception_handler(app: FastAPI) -> None:
    """Register routing error handler (unknown path, wrong method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Keep the routing status, wrap the detail in the envelope."""
        logger.warning(
            f"HTTP {exc.status_code} on {request.url.path}",
            extra={"path": request.url.path, "status_code": exc.status_code},
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"data": None, "message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: unclassified failures become InternalError/500."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        error = InternalError(UNHANDLED_ERROR_MESSAGE, [str(exc)])
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    error = ValidationError(
        "Invalid request data",
        [
            f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
            for e in exc.errors()
        ],
    )
    return error.to_response()
