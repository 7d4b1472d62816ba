"""Canonical temperature scale names and the constants of the formula table."""
from __future__ import annotations

from typing import Final, Tuple

CELSIUS_NAME: Final[str] = "celsius"
FAHRENHEIT_NAME: Final[str] = "fahrenheit"
KELVIN_NAME: Final[str] = "kelvin"
RANKINE_NAME: Final[str] = "rankine"

# Match order for prefix parsing; the first hit wins.
CANONICAL_SCALE_NAMES: Final[Tuple[str, ...]] = (
    CELSIUS_NAME,
    FAHRENHEIT_NAME,
    KELVIN_NAME,
    RANKINE_NAME,
)

FAHRENHEIT_OFFSET: Final[float] = 32.0
KELVIN_OFFSET: Final[float] = 273.15
RANKINE_OFFSET: Final[float] = 459.67
RANKINE_CELSIUS_OFFSET: Final[float] = 491.67

CELSIUS_TO_FAHRENHEIT: Final[float] = 9.0 / 5.0
FAHRENHEIT_TO_CELSIUS: Final[float] = 5.0 / 9.0

DISPLAY_PRECISION: Final[int] = 2

__all__ = [
    "CELSIUS_NAME",
    "FAHRENHEIT_NAME",
    "KELVIN_NAME",
    "RANKINE_NAME",
    "CANONICAL_SCALE_NAMES",
    "FAHRENHEIT_OFFSET",
    "KELVIN_OFFSET",
    "RANKINE_OFFSET",
    "RANKINE_CELSIUS_OFFSET",
    "CELSIUS_TO_FAHRENHEIT",
    "FAHRENHEIT_TO_CELSIUS",
    "DISPLAY_PRECISION",
]
