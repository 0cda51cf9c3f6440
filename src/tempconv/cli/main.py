"""CLI entry-point: Click command group and dispatch."""

from __future__ import annotations

import dataclasses
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from tempconv.dispatch import describe
from tempconv.errors import ConversionError, UnknownScaleError
from tempconv.models.config import AppSettings
from tempconv.models.scale import Scale
from tempconv.output.formatter import OutputFormatter

logger = logging.getLogger(__name__)

# Lets negative temperatures such as ``-40`` through as positional arguments.
_NUMERIC_ARGS = {"ignore_unknown_options": True}

# ---------------------------------------------------------------------------
# Application context (stored in ctx.obj)
# ---------------------------------------------------------------------------


@dataclasses.dataclass
class AppContext:
    """Shared state passed to every Click command via ``@click.pass_obj``."""

    output_format: str | None
    quiet: bool
    verbose: bool
    _formatter: OutputFormatter | None = dataclasses.field(default=None, repr=False)

    @property
    def formatter(self) -> OutputFormatter:
        if self._formatter is None:
            force = "quiet" if self.quiet else self.output_format
            self._formatter = OutputFormatter(force_format=force)
        return self._formatter


def _configure_logging(verbose: bool) -> None:
    """Route ``tempconv`` debug logging to stderr through Rich."""
    if not verbose:
        return
    pkg_logger = logging.getLogger("tempconv")
    pkg_logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in pkg_logger.handlers):
        pkg_logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
        pkg_logger.propagate = False


# ---------------------------------------------------------------------------
# Root Click group
# ---------------------------------------------------------------------------


@click.group()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["rich", "json", "quiet"]),
    default=None,
    help="Output format (default: auto-detect)",
)
@click.option("--quiet", is_flag=True, default=False, help="Suppress normal output")
@click.option("--verbose", is_flag=True, default=False, help="Enable verbose logging")
@click.pass_context
def cli(
    ctx: click.Context,
    output_format: str | None,
    quiet: bool,
    verbose: bool,
) -> None:
    """Convert temperatures between Celsius, Fahrenheit and Kelvin."""
    settings = AppSettings()
    verbose = verbose or settings.verbose
    _configure_logging(verbose)
    ctx.obj = AppContext(
        output_format=output_format or settings.output_format,
        quiet=quiet,
        verbose=verbose,
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@cli.command("convert", context_settings=_NUMERIC_ARGS)
@click.argument("value", type=float)
@click.argument("from_code", metavar="FROM")
@click.argument("to_code", metavar="TO")
@click.pass_obj
def convert_cmd(app_ctx: AppContext, value: float, from_code: str, to_code: str) -> None:
    """Convert VALUE from one scale to another (codes: C, F, K)."""
    formatter = app_ctx.formatter
    conv = describe(value, from_code, to_code)
    logger.debug("Converted %s", conv)
    formatter.conversion(conv)


@cli.command("table", context_settings=_NUMERIC_ARGS)
@click.argument("value", type=float)
@click.argument("from_code", metavar="FROM")
@click.pass_obj
def table_cmd(app_ctx: AppContext, value: float, from_code: str) -> None:
    """Show VALUE expressed in every scale."""
    conversions = [describe(value, from_code, scale.value) for scale in Scale]
    app_ctx.formatter.conversion_table(conversions)


@cli.command("scales")
@click.pass_obj
def scales_cmd(app_ctx: AppContext) -> None:
    """List supported scales and their absolute zero."""
    app_ctx.formatter.scales()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and dispatch to the appropriate command handler."""
    args = sys.argv[1:] if argv is None else argv
    ctx: click.Context | None = None
    try:
        ctx = cli.make_context("tempconv", args)
        with ctx:
            cli.invoke(ctx)
    except click.exceptions.Exit as exc:
        raise SystemExit(exc.exit_code) from None
    except click.exceptions.Abort:
        raise SystemExit(1) from None
    except click.ClickException as exc:
        exc.show()
        raise SystemExit(exc.exit_code) from None
    except KeyboardInterrupt:
        raise SystemExit(130) from None
    except ConversionError as exc:
        app_ctx = ctx.obj if ctx is not None and isinstance(ctx.obj, AppContext) else None
        formatter = app_ctx.formatter if app_ctx is not None else OutputFormatter()
        code = "unknown_scale" if isinstance(exc, UnknownScaleError) else type(exc).__name__
        command = (ctx.invoked_subcommand if ctx is not None else None) or "unknown"
        formatter.error(code=code, message=str(exc), command=command)
        raise SystemExit(1) from exc
