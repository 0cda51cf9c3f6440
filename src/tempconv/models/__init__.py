from __future__ import annotations

from tempconv.models.config import AppSettings
from tempconv.models.result import Conversion
from tempconv.models.scale import Scale

__all__ = [
    "AppSettings",
    "Conversion",
    "Scale",
]
