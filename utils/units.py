"""Unit conversion helpers shared across the converter.

Every helper accepts scalars as well as numpy arrays and pandas Series and
preserves the input type, so whole columns convert in a single call.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, Tuple, Union, cast

from constants.scales import (
    CELSIUS_TO_FAHRENHEIT,
    FAHRENHEIT_OFFSET,
    FAHRENHEIT_TO_CELSIUS,
    KELVIN_OFFSET,
    RANKINE_CELSIUS_OFFSET,
    RANKINE_OFFSET,
)
from utils.scales import Scale

if TYPE_CHECKING:  # pragma: no cover - typing only
    import numpy as np
    import pandas as pd

NumberLike = Union[float, int, "np.ndarray", "pd.Series"]


def celsius_to_fahrenheit(values: NumberLike) -> NumberLike:
    """Convert Celsius inputs to Fahrenheit, preserving the original type."""
    return cast(NumberLike, (values * CELSIUS_TO_FAHRENHEIT) + FAHRENHEIT_OFFSET)


def celsius_to_kelvin(values: NumberLike) -> NumberLike:
    return cast(NumberLike, values + KELVIN_OFFSET)


def celsius_to_rankine(values: NumberLike) -> NumberLike:
    return cast(NumberLike, (values * CELSIUS_TO_FAHRENHEIT) + RANKINE_CELSIUS_OFFSET)


def fahrenheit_to_celsius(values: NumberLike) -> NumberLike:
    """Convert Fahrenheit inputs to Celsius, preserving the original type."""
    return cast(NumberLike, (values - FAHRENHEIT_OFFSET) * FAHRENHEIT_TO_CELSIUS)


def fahrenheit_to_kelvin(values: NumberLike) -> NumberLike:
    return cast(NumberLike, ((values - FAHRENHEIT_OFFSET) * FAHRENHEIT_TO_CELSIUS) + KELVIN_OFFSET)


def fahrenheit_to_rankine(values: NumberLike) -> NumberLike:
    return cast(NumberLike, values + RANKINE_OFFSET)


def kelvin_to_celsius(values: NumberLike) -> NumberLike:
    return cast(NumberLike, values - KELVIN_OFFSET)


def kelvin_to_fahrenheit(values: NumberLike) -> NumberLike:
    return cast(NumberLike, ((values - KELVIN_OFFSET) * CELSIUS_TO_FAHRENHEIT) + FAHRENHEIT_OFFSET)


def kelvin_to_rankine(values: NumberLike) -> NumberLike:
    return cast(NumberLike, ((values - KELVIN_OFFSET) * CELSIUS_TO_FAHRENHEIT) + RANKINE_CELSIUS_OFFSET)


def rankine_to_celsius(values: NumberLike) -> NumberLike:
    return cast(NumberLike, (values - RANKINE_CELSIUS_OFFSET) * FAHRENHEIT_TO_CELSIUS)


def rankine_to_fahrenheit(values: NumberLike) -> NumberLike:
    return cast(NumberLike, values - RANKINE_OFFSET)


def rankine_to_kelvin(values: NumberLike) -> NumberLike:
    return cast(NumberLike, ((values - RANKINE_CELSIUS_OFFSET) * FAHRENHEIT_TO_CELSIUS) + KELVIN_OFFSET)


_CONVERTERS: Dict[Tuple[Scale, Scale], Callable[[NumberLike], NumberLike]] = {
    (Scale.CELSIUS, Scale.FAHRENHEIT): celsius_to_fahrenheit,
    (Scale.CELSIUS, Scale.KELVIN): celsius_to_kelvin,
    (Scale.CELSIUS, Scale.RANKINE): celsius_to_rankine,
    (Scale.FAHRENHEIT, Scale.CELSIUS): fahrenheit_to_celsius,
    (Scale.FAHRENHEIT, Scale.KELVIN): fahrenheit_to_kelvin,
    (Scale.FAHRENHEIT, Scale.RANKINE): fahrenheit_to_rankine,
    (Scale.KELVIN, Scale.CELSIUS): kelvin_to_celsius,
    (Scale.KELVIN, Scale.FAHRENHEIT): kelvin_to_fahrenheit,
    (Scale.KELVIN, Scale.RANKINE): kelvin_to_rankine,
    (Scale.RANKINE, Scale.CELSIUS): rankine_to_celsius,
    (Scale.RANKINE, Scale.FAHRENHEIT): rankine_to_fahrenheit,
    (Scale.RANKINE, Scale.KELVIN): rankine_to_kelvin,
}


def convert(degrees: NumberLike, from_scale: Scale, to_scale: Scale) -> NumberLike:
    """Convert ``degrees`` from one scale to another.

    Same-scale conversions return the input untouched. Non-finite values
    propagate through the arithmetic; nothing is validated or rounded.
    """
    if from_scale is to_scale:
        return degrees
    return _CONVERTERS[(from_scale, to_scale)](degrees)


__all__ = [
    "NumberLike",
    "celsius_to_fahrenheit",
    "celsius_to_kelvin",
    "celsius_to_rankine",
    "fahrenheit_to_celsius",
    "fahrenheit_to_kelvin",
    "fahrenheit_to_rankine",
    "kelvin_to_celsius",
    "kelvin_to_fahrenheit",
    "kelvin_to_rankine",
    "rankine_to_celsius",
    "rankine_to_fahrenheit",
    "rankine_to_kelvin",
    "convert",
]
