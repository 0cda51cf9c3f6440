"""Pairwise temperature conversions clamped at absolute zero.

Every function returns the destination scale's absolute-zero constant when
its input is at or below the source scale's floor, so no result can fall
below the physical limit of the scale it is expressed in.
"""

from __future__ import annotations

ABSOLUTE_ZERO_C = -273.15
ABSOLUTE_ZERO_F = -459.67
ABSOLUTE_ZERO_K = 0.0


def celsius_to_fahrenheit(c: float) -> float:
    """Convert Celsius to Fahrenheit (``c * 9 / 5 + 32``)."""
    if c <= ABSOLUTE_ZERO_C:
        return ABSOLUTE_ZERO_F
    return c * 9.0 / 5.0 + 32.0


def celsius_to_kelvin(c: float) -> float:
    """Convert Celsius to Kelvin (``c + 273.15``)."""
    if c <= ABSOLUTE_ZERO_C:
        return ABSOLUTE_ZERO_K
    return c + 273.15


def fahrenheit_to_celsius(f: float) -> float:
    """Convert Fahrenheit to Celsius (``(f - 32) * 5 / 9``)."""
    if f <= ABSOLUTE_ZERO_F:
        return ABSOLUTE_ZERO_C
    return (f - 32.0) * 5.0 / 9.0


def fahrenheit_to_kelvin(f: float) -> float:
    """Convert Fahrenheit to Kelvin (``(f - 32) * 5 / 9 + 273.15``)."""
    if f <= ABSOLUTE_ZERO_F:
        return ABSOLUTE_ZERO_K
    return (f - 32.0) * 5.0 / 9.0 + 273.15


def kelvin_to_celsius(k: float) -> float:
    """Convert Kelvin to Celsius (``k - 273.15``)."""
    if k <= ABSOLUTE_ZERO_K:
        return ABSOLUTE_ZERO_C
    return k - 273.15


def kelvin_to_fahrenheit(k: float) -> float:
    """Convert Kelvin to Fahrenheit (``k * 9 / 5 - 459.67``)."""
    if k <= ABSOLUTE_ZERO_K:
        return ABSOLUTE_ZERO_F
    return k * 9.0 / 5.0 - 459.67
