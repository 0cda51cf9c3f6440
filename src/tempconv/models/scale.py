"""Temperature scale enumeration and unit-code parsing."""

from __future__ import annotations

from enum import StrEnum

from tempconv._internal.units import ABSOLUTE_ZERO_C, ABSOLUTE_ZERO_F, ABSOLUTE_ZERO_K
from tempconv.errors import UnknownScaleError


class Scale(StrEnum):
    """Supported temperature scales, valued by their lowercase unit code."""

    CELSIUS = "c"
    FAHRENHEIT = "f"
    KELVIN = "k"

    @classmethod
    def parse(cls, code: str) -> Scale:
        """Return the scale named by a single-character, case-insensitive *code*.

        Raises :class:`~tempconv.errors.UnknownScaleError` for anything else.
        """
        scale = _BY_CODE.get(code)
        if scale is None:
            raise UnknownScaleError(code)
        return scale

    @property
    def absolute_zero(self) -> float:
        return _ABSOLUTE_ZERO[self]

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


# Only the ASCII letters; str.lower() would also fold e.g. the Kelvin sign U+212A.
_BY_CODE: dict[str, Scale] = {
    **{s.value: s for s in Scale},
    **{s.value.upper(): s for s in Scale},
}

_ABSOLUTE_ZERO: dict[Scale, float] = {
    Scale.CELSIUS: ABSOLUTE_ZERO_C,
    Scale.FAHRENHEIT: ABSOLUTE_ZERO_F,
    Scale.KELVIN: ABSOLUTE_ZERO_K,
}

_SYMBOLS: dict[Scale, str] = {
    Scale.CELSIUS: "°C",
    Scale.FAHRENHEIT: "°F",
    Scale.KELVIN: "K",
}
