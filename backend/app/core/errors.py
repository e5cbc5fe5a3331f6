"""Error Hierarchy: typed, categorized exceptions for every failure of the weather API.

Invariants:
    - Every error has a code (str), message (str), http_status (int), causes and category
    - Errors are built at the point of failure and never mutated afterwards (causes is a tuple)
    - to_response() produces the uniform envelope {data, message, causes}
    - Lookup failures from infrastructure are reclassified by the use case,
      they never reach the HTTP boundary as-is

Design Decisions:
    - Single hierarchy with APIError base: FastAPI global handler catches all (ADR: uniform error shape)
    - No SystemError/TimeoutError names: they would shadow Python builtins,
      so the system kind is InternalError and the timeout kind is ServiceTimeoutError
"""

from enum import Enum
from typing import Iterable


class ErrorCategory(str, Enum):
    """High-level error categories, surfaced in logs as the error context."""
    VALIDATION = "validation"
    BUSINESS = "business"
    SYSTEM = "system"
    EXTERNAL = "external"


# ─── Error codes ────────────────────────────────────────────────

CODE_INVALID_INPUT = "INVALID_INPUT"
CODE_MISSING_PARAMETER = "MISSING_PARAMETER"
CODE_INVALID_FORMAT = "INVALID_FORMAT"
CODE_RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
CODE_BUSINESS_RULE = "BUSINESS_RULE_VIOLATION"
CODE_INTERNAL_ERROR = "INTERNAL_SERVER_ERROR"
CODE_EXTERNAL_SERVICE = "EXTERNAL_SERVICE_ERROR"
CODE_SERVICE_TIMEOUT = "SERVICE_TIMEOUT"

CODE_INVALID_ZIPCODE = "INVALID_ZIPCODE"
CODE_ZIPCODE_NOT_FOUND = "ZIPCODE_NOT_FOUND"


class APIError(Exception):
    """Base exception for all weather API errors."""

    def __init__(
        self,
        code: str,
        message: str,
        http_status: int,
        causes: Iterable[str] | None = None,
        category: ErrorCategory = ErrorCategory.SYSTEM,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.http_status = http_status
        self.causes = tuple(causes or ())
        self.category = category

    def to_response(self) -> dict:
        """Convert to the uniform REST envelope."""
        response: dict = {"data": None, "message": self.message}
        if self.causes:
            response["causes"] = list(self.causes)
        return response

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self.code!r}, "
            f"http_status={self.http_status}, message={self.message!r})"
        )


# ─── Validation Errors (400-level) ──────────────────────────────

class ValidationError(APIError):
    """Request input has the wrong shape."""
    def __init__(
        self, message: str, causes: Iterable[str] | None = None,
        code: str = CODE_INVALID_INPUT, http_status: int = 400,
    ):
        super().__init__(
            code, message, http_status, causes, ErrorCategory.VALIDATION,
        )


class InvalidFormatError(ValidationError):
    """A value could not be parsed into its domain type."""
    def __init__(self, message: str, causes: Iterable[str] | None = None):
        super().__init__(message, causes, code=CODE_INVALID_FORMAT)


class MissingParameterError(ValidationError):
    """A required request parameter was not provided."""
    def __init__(self, message: str, causes: Iterable[str] | None = None):
        super().__init__(message, causes, code=CODE_MISSING_PARAMETER)


# ─── Business Errors (400/404) ──────────────────────────────────

class BusinessError(APIError):
    """Domain rule violation."""
    def __init__(
        self, code: str, message: str, causes: Iterable[str] | None = None,
        http_status: int = 400,
    ):
        super().__init__(
            code, message, http_status, causes, ErrorCategory.BUSINESS,
        )


class NotFoundError(BusinessError):
    """Requested resource does not exist."""
    def __init__(
        self, message: str, causes: Iterable[str] | None = None,
        code: str = CODE_RESOURCE_NOT_FOUND,
    ):
        super().__init__(code, message, causes, http_status=404)


# ─── System / External Errors (500-level) ───────────────────────

class InternalError(APIError):
    """Unexpected failure inside the service."""
    def __init__(
        self, message: str = "Internal server error occurred",
        causes: Iterable[str] | None = None,
    ):
        super().__init__(
            CODE_INTERNAL_ERROR, message, 500, causes, ErrorCategory.SYSTEM,
        )


class ExternalServiceError(APIError):
    """Upstream dependency failed."""
    def __init__(
        self, message: str, causes: Iterable[str] | None = None,
        code: str = CODE_EXTERNAL_SERVICE, http_status: int = 502,
    ):
        super().__init__(
            code, message, http_status, causes, ErrorCategory.EXTERNAL,
        )


class ServiceTimeoutError(ExternalServiceError):
    """Request-scoped deadline expired before a response was produced."""
    def __init__(
        self, message: str = "Request timeout exceeded",
        causes: Iterable[str] | None = None,
    ):
        super().__init__(
            message, causes, code=CODE_SERVICE_TIMEOUT, http_status=504,
        )


# ─── Lookup Errors (raised by infrastructure clients) ───────────

class AddressLookupError(ExternalServiceError):
    """Address service call failed (transport, status or decode)."""
    def __init__(self, reason: str):
        super().__init__("Address lookup failed", [reason])
        self.reason = reason


class WeatherLookupError(ExternalServiceError):
    """Weather service call failed (transport, status or decode)."""
    def __init__(self, reason: str):
        super().__init__("Weather lookup failed", [reason])
        self.reason = reason


# ─── Use Case Errors ────────────────────────────────────────────

class InvalidZipcodeError(ValidationError):
    """Postal code does not have a valid CEP shape."""
    def __init__(self):
        super().__init__(
            "invalid zipcode",
            ["The provided zipcode format is invalid"],
            code=CODE_INVALID_ZIPCODE, http_status=422,
        )


class ZipcodeNotFoundError(NotFoundError):
    """Address service could not resolve the postal code."""
    def __init__(self):
        super().__init__(
            "can not find zipcode",
            ["The provided zipcode was not found"],
            code=CODE_ZIPCODE_NOT_FOUND,
        )


class WeatherServiceError(ExternalServiceError):
    """Weather service could not provide a reading for the city."""
    def __init__(self):
        super().__init__(
            "Weather service temporarily unavailable",
            ["Unable to fetch weather data from external service"],
        )
