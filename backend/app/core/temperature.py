"""Temperature Conversion: pure unit math for weather results.

Invariants:
    - kelvin = celsius + 273.15 exactly (no rounding applied)
"""

KELVIN_OFFSET = 273.15


def celsius_to_kelvin(celsius: float) -> float:
    return celsius + KELVIN_OFFSET
