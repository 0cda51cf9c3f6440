from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

from rich.console import Console

from tempconv.models.scale import Scale
from tempconv.output.json_output import format_json_error, format_json_response
from tempconv.output.rich_output import RichOutput

if TYPE_CHECKING:
    from io import TextIOBase

    from tempconv.models.result import Conversion


class OutputFormatter:
    """Render conversions as JSON envelopes or Rich terminal output.

    The format is *force_format* when given, otherwise ``"rich"`` when
    *stream* (default ``sys.stdout``) is a TTY and ``"json"`` when it is
    piped.  ``"quiet"`` renders through Rich on stderr so stdout stays empty.
    """

    def __init__(
        self,
        *,
        stream: TextIOBase | Any | None = None,
        force_format: str | None = None,
    ) -> None:
        self._stream = stream or sys.stdout
        if force_format is not None:
            self._format = force_format
        elif hasattr(self._stream, "isatty") and self._stream.isatty():
            self._format = "rich"
        else:
            self._format = "json"

        if self._format == "quiet":
            console = Console(stderr=True)
        else:
            console = Console(file=self._stream)
        self._rich = RichOutput(console)

    @property
    def format(self) -> str:  # noqa: A003
        return self._format

    def _emit_json(self, payload: str) -> None:
        print(payload, file=self._stream)  # noqa: T201

    def conversion(self, conv: Conversion, *, command: str = "convert") -> None:
        """Emit a single conversion."""
        if self._format == "json":
            self._emit_json(format_json_response(data=conv, command=command))
        else:
            self._rich.conversion(conv)

    def conversion_table(self, conversions: list[Conversion], *, command: str = "table") -> None:
        """Emit one input value expressed in several scales."""
        if self._format == "json":
            self._emit_json(format_json_response(data=conversions, command=command))
        else:
            self._rich.conversion_table(conversions)

    def scales(self, *, command: str = "scales") -> None:
        """Emit the supported scales with their code, symbol and absolute zero."""
        if self._format == "json":
            rows = [
                {"code": s.value.upper(), "symbol": s.symbol, "absolute_zero": s.absolute_zero}
                for s in Scale
            ]
            self._emit_json(format_json_response(data=rows, command=command))
        else:
            self._rich.scale_list()

    def error(self, *, code: str, message: str, command: str) -> None:
        """Emit a failed command as a JSON error envelope or a red error line."""
        if self._format == "json":
            self._emit_json(format_json_error(code=code, message=message, command=command))
        else:
            self._rich.error(message)
