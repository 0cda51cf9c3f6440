from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table

from tempconv.models.scale import Scale

if TYPE_CHECKING:
    from rich.console import Console

    from tempconv.models.result import Conversion

_SCALE_NAMES: dict[Scale, str] = {
    Scale.CELSIUS: "Celsius",
    Scale.FAHRENHEIT: "Fahrenheit",
    Scale.KELVIN: "Kelvin",
}


def _fmt(value: float, scale: Scale) -> str:
    return f"{value:g} {scale.symbol}"


class RichOutput:
    """Rich-based terminal output helpers for *tempconv*."""

    def __init__(self, console: Console) -> None:
        self._con = console

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def conversion(self, conv: Conversion) -> None:
        """Print a single ``value -> result`` line."""
        line = (
            f"{_fmt(conv.value, conv.from_scale)} = "
            f"[bold cyan]{_fmt(conv.result, conv.to_scale)}[/bold cyan]"
        )
        if conv.clamped:
            line += "  [yellow](clamped at absolute zero)[/yellow]"
        self._con.print(line)

    def conversion_table(self, conversions: list[Conversion]) -> None:
        """Print a table of the same input expressed in several scales."""
        if not conversions:
            return
        first = conversions[0]
        table = Table(title=f"{_fmt(first.value, first.from_scale)} in every scale")
        table.add_column("Scale", style="bold")
        table.add_column("Value", justify="right")

        for conv in conversions:
            table.add_row(_SCALE_NAMES[conv.to_scale], _fmt(conv.result, conv.to_scale))

        self._con.print(table)

    # ------------------------------------------------------------------
    # Scales
    # ------------------------------------------------------------------

    def scale_list(self) -> None:
        """Print every supported scale with its code and absolute zero."""
        table = Table(title="Temperature Scales")
        table.add_column("Code", style="cyan")
        table.add_column("Scale")
        table.add_column("Symbol")
        table.add_column("Absolute zero", justify="right")

        for scale in Scale:
            table.add_row(
                scale.value.upper(),
                _SCALE_NAMES[scale],
                scale.symbol,
                _fmt(scale.absolute_zero, scale),
            )

        self._con.print(table)

    # ------------------------------------------------------------------
    # Errors
    # ------------------------------------------------------------------

    def error(self, message: str) -> None:
        """Print a bold red error line."""
        self._con.print(f"[bold red]Error:[/bold red] {message}")
