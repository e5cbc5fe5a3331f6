"""Response Envelope: uniform {data, message, causes} shape for every API response.

Invariants:
    - Success responses carry data and message, never causes
    - Error responses carry data=null, message and (when known) causes

Design Decisions:
    - Generic model over per-route envelopes: OpenAPI docs show the concrete data type
"""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Uniform API response body."""
    data: T | None = None
    message: str
    causes: list[str] | None = None
