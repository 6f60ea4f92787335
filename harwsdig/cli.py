"""Typer CLI — dump command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from harwsdig import __version__

app = typer.Typer(
    name="harwsdig",
    help="Dump WebSocket sessions recorded in HAR (HTTP Archive) captures.",
    rich_markup_mode="rich",
)
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"harwsdig v{__version__}")
        raise typer.Exit()


def setup_logging(level: str) -> None:
    """Install the rich stderr handler once, then apply ``level`` to the root logger."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(
        level=numeric,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )
    logging.getLogger().setLevel(numeric)


def _stdin_is_interactive() -> bool:
    return sys.stdin.isatty()


def fail(message: str) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", "-V", help="Show version and exit.", callback=version_callback),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log diagnostics to stderr.")
    ] = False,
) -> None:
    """HARWSDIG — dump WebSocket sessions recorded in HAR captures."""
    ctx.obj = {"verbose": verbose}
    if ctx.invoked_subcommand is None:
        if not _stdin_is_interactive():
            fail("Missing command. Try 'harwsdig --help'.")
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command()
def dump(
    ctx: typer.Context,
    file: Annotated[
        Optional[Path],
        typer.Argument(help="HAR file to read. Reads standard input when omitted."),
    ] = None,
    full_url: Annotated[
        bool, typer.Option("--full-url", help="Show request URLs untruncated.")
    ] = False,
    full_data: Annotated[
        bool, typer.Option("--full-data", help="Show message payloads untruncated.")
    ] = False,
    raw_data: Annotated[
        bool, typer.Option("--raw-data", help="Do not escape newlines and tabs in text messages.")
    ] = False,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Path to harwsdig.yaml config."),
    ] = None,
) -> None:
    """Dump all WebSocket sessions."""
    from harwsdig.config import Settings
    from harwsdig.core.renderer import TranscriptRenderer
    from harwsdig.storage.loader import load_har

    if file is None and _stdin_is_interactive():
        typer.echo(ctx.get_help())
        raise typer.Exit()

    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    setup_logging("DEBUG" if verbose else "WARNING")
    settings = Settings.load(config)
    if not verbose:
        setup_logging(settings.log_level)

    display = settings.display
    options = display.model_copy(
        update={
            "full_url": display.full_url or full_url,
            "full_data": display.full_data or full_data,
            "raw_data": display.raw_data or raw_data,
        }
    )

    try:
        har = load_har(file, stdin=None if file else typer.get_binary_stream("stdin"))
        for line in TranscriptRenderer(options).render(har):
            typer.echo(line)
    except (ValueError, OverflowError, OSError) as e:
        logger.debug("Dump failed", exc_info=True)
        fail(str(e))
