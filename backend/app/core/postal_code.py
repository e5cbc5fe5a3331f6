"""Postal Code: immutable CEP value object, normalized to DDDDD-DDD on construction.

Invariants:
    - An instance always holds a value matching ^\\d{5}-\\d{3}$
    - Digits are ASCII only (re.ASCII), Unicode digits are rejected
    - Construction is the only mutation point (frozen dataclass)
    - Rejected input raises InvalidFormatError, so no instance ever exists for it
    - Pure: no IO, no logging

Design Decisions:
    - Frozen dataclass over NewType: the normalization has to run on every construction
    - __post_init__ rewrites the value with object.__setattr__ (only place frozen is bypassed)
"""

import re
from dataclasses import dataclass

from app.core.errors import InvalidFormatError

_DASHED = re.compile(r"\d{5}-\d{3}", re.ASCII)
_DIGITS_ONLY = re.compile(r"\d{8}", re.ASCII)


@dataclass(frozen=True)
class PostalCode:
    """Brazilian postal code (CEP) in canonical DDDDD-DDD form."""
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise InvalidFormatError(
                "CEP inválido", ["Postal code must be a string"],
            )
        raw = self.value.strip()
        if _DIGITS_ONLY.fullmatch(raw):
            raw = f"{raw[:5]}-{raw[5:]}"
        elif not _DASHED.fullmatch(raw):
            raise InvalidFormatError(
                "CEP inválido",
                ["Postal code must match DDDDD-DDD or DDDDDDDD"],
            )
        object.__setattr__(self, "value", raw)

    def __str__(self) -> str:
        return self.value
