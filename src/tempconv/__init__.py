"""Convert temperatures between Celsius, Fahrenheit and Kelvin."""

from __future__ import annotations

from tempconv._internal.units import (
    ABSOLUTE_ZERO_C,
    ABSOLUTE_ZERO_F,
    ABSOLUTE_ZERO_K,
    celsius_to_fahrenheit,
    celsius_to_kelvin,
    fahrenheit_to_celsius,
    fahrenheit_to_kelvin,
    kelvin_to_celsius,
    kelvin_to_fahrenheit,
)
from tempconv.dispatch import (
    INVALID_CONVERSION,
    convert,
    convert_scales,
    convert_strict,
    describe,
    is_below_absolute_zero,
)
from tempconv.errors import ConversionError, UnknownScaleError
from tempconv.models.scale import Scale

__version__ = "0.1.0"

__all__ = [
    "ABSOLUTE_ZERO_C",
    "ABSOLUTE_ZERO_F",
    "ABSOLUTE_ZERO_K",
    "INVALID_CONVERSION",
    "ConversionError",
    "Scale",
    "UnknownScaleError",
    "__version__",
    "celsius_to_fahrenheit",
    "celsius_to_kelvin",
    "convert",
    "convert_scales",
    "convert_strict",
    "describe",
    "fahrenheit_to_celsius",
    "fahrenheit_to_kelvin",
    "is_below_absolute_zero",
    "kelvin_to_celsius",
    "kelvin_to_fahrenheit",
]
