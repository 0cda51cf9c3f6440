"""Exceptions raised by strict conversions and surfaced by the CLI."""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for temperature conversion failures."""


class UnknownScaleError(ConversionError):
    """Raised when a unit code does not name a known temperature scale."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Unknown temperature scale {code!r} (expected one of C, F, K)")
