"""Dispatch conversions by unit code.

:func:`convert` is total: an unrecognised unit code yields
:data:`INVALID_CONVERSION` instead of raising.  :func:`convert_strict` routes
identically but raises :class:`~tempconv.errors.UnknownScaleError`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tempconv._internal.units import (
    celsius_to_fahrenheit,
    celsius_to_kelvin,
    fahrenheit_to_celsius,
    fahrenheit_to_kelvin,
    kelvin_to_celsius,
    kelvin_to_fahrenheit,
)
from tempconv.errors import UnknownScaleError
from tempconv.models.result import Conversion
from tempconv.models.scale import Scale

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

# Below every scale's absolute zero, so never a valid temperature.
INVALID_CONVERSION = -999.0

_CONVERSIONS: dict[tuple[Scale, Scale], Callable[[float], float]] = {
    (Scale.CELSIUS, Scale.FAHRENHEIT): celsius_to_fahrenheit,
    (Scale.CELSIUS, Scale.KELVIN): celsius_to_kelvin,
    (Scale.FAHRENHEIT, Scale.CELSIUS): fahrenheit_to_celsius,
    (Scale.FAHRENHEIT, Scale.KELVIN): fahrenheit_to_kelvin,
    (Scale.KELVIN, Scale.CELSIUS): kelvin_to_celsius,
    (Scale.KELVIN, Scale.FAHRENHEIT): kelvin_to_fahrenheit,
}


def is_below_absolute_zero(value: float, scale: Scale) -> bool:
    """Return ``True`` if *value* is at or below *scale*'s absolute zero."""
    return value <= scale.absolute_zero


def convert_scales(value: float, source: Scale, target: Scale) -> float:
    """Convert *value* between two parsed scales.

    Same-scale conversions return *value* unchanged without clamping.
    """
    if source is target:
        return value
    return _CONVERSIONS[(source, target)](value)


def convert(value: float, from_code: str, to_code: str) -> float:
    """Convert *value* from one unit code to another.

    Codes are single characters from ``{c, f, k}`` in either case.  Literally
    identical codes return *value* untouched, whatever they are.  Codes that
    fold to the same scale (``"C"`` and ``"c"``) also return *value*.  Any
    unrecognised code returns :data:`INVALID_CONVERSION`.
    """
    if from_code == to_code:
        return value
    try:
        source = Scale.parse(from_code)
        target = Scale.parse(to_code)
    except UnknownScaleError as exc:
        logger.debug("Invalid conversion %r -> %r: %s", from_code, to_code, exc)
        return INVALID_CONVERSION
    return convert_scales(value, source, target)


def convert_strict(value: float, from_code: str, to_code: str) -> float:
    """Like :func:`convert`, but raise on an unrecognised unit code."""
    return convert_scales(value, Scale.parse(from_code), Scale.parse(to_code))


def describe(value: float, from_code: str, to_code: str) -> Conversion:
    """Run a strict conversion and return it as a :class:`Conversion` record."""
    source = Scale.parse(from_code)
    target = Scale.parse(to_code)
    return Conversion(
        value=value,
        from_scale=source,
        to_scale=target,
        result=convert_scales(value, source, target),
        clamped=source is not target and is_below_absolute_zero(value, source),
    )
