"""Songbook CLI - Main application entry point and app structure."""

from typing import Annotated

from rich.console import Console
import typer

from songbook import __version__
from songbook.config import get_logger, setup_loguru_logger
from songbook.infrastructure.cli.playlist_commands import register_playlist_commands

VERSION = __version__

console = Console(width=80)
logger = get_logger(__name__)

app = typer.Typer(
    help=f"🎵 Songbook v{VERSION} - Filter and order your song catalogs",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
    pretty_exceptions_enable=True,
    pretty_exceptions_short=True,
    pretty_exceptions_show_locals=False,
)

register_playlist_commands(app)


@app.command(name="version", rich_help_panel="⚙️ System")
def version_command() -> None:
    """Show version information."""
    console.print(
        f"[bold bright_blue]🎵 Songbook[/bold bright_blue] [dim]v{VERSION}[/dim]"
    )


@app.callback()
def init_cli(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output"),
    ] = False,
) -> None:
    """Initialize Songbook CLI."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    setup_loguru_logger(verbose)


def main() -> int:
    """Application entry point."""
    try:
        return app() or 0
    except Exception:
        logger.exception("Unhandled exception")
        return 1
