from __future__ import annotations

from pydantic import BaseModel

from tempconv.models.scale import Scale  # noqa: TC001


class Conversion(BaseModel):
    """A single conversion and its outcome."""

    value: float
    from_scale: Scale
    to_scale: Scale
    result: float
    clamped: bool = False
