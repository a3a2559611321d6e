"""UI helpers for CLI interaction.

This module provides reusable UI components and helpers for the CLI,
keeping the presentation logic separate from business logic.
"""

from collections import Counter
from collections.abc import Callable
import functools
import json
from typing import ParamSpec, TypeVar

from rich.console import Console
from rich.table import Table
import typer

from songbook.config import get_logger
from songbook.domain.entities import Playlist, format_duration

# Initialize console and logger
console = Console()
logger = get_logger(__name__)

# Type variables for command handler decorator
P = ParamSpec("P")
R = TypeVar("R")


def command_error_handler(func: Callable[P, R]) -> Callable[P, R]:
    """Decorator to standardize error handling for CLI commands.

    This decorator wraps a command function to:
    1. Provide consistent error handling using Typer's Exit mechanism
    2. Log errors using Loguru with proper context
    3. Display user-friendly error messages with Rich
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        operation = func.__name__.replace("_", " ")

        with logger.contextualize(operation=operation):
            try:
                logger.debug(f"Executing {operation}")
                return func(*args, **kwargs)

            except typer.Exit:
                raise

            except typer.Abort:
                logger.info(f"Operation {operation} aborted by user")
                raise

            except Exception as e:
                logger.exception(f"Error during {operation}")
                console.print(f"\n[bold red]✗ Error during {operation}:[/bold red] {e}")
                raise typer.Exit(code=1) from e

    return wrapper


def playlist_to_records(playlist: Playlist) -> list[dict[str, object]]:
    """Plain dictionaries for every song in the playlist's current order."""
    return [
        {
            "serial_number": song.serial_number,
            "name": song.name,
            "artist": song.artist,
            "genre": str(song.genre),
            "duration": song.duration,
        }
        for song in playlist
    ]


def display_playlist(
    playlist: Playlist,
    title: str | None = None,
    output_format: str = "table",
) -> None:
    """Render a playlist as a Rich table, JSON, or its own text form."""
    if output_format == "json":
        console.print_json(json.dumps(playlist_to_records(playlist)))
        return

    if output_format == "text":
        console.print(str(playlist), markup=False, highlight=False, soft_wrap=True)
        return

    table = Table(title=title or "Playlist")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Name", style="green")
    table.add_column("Artist", style="cyan")
    table.add_column("Genre", style="magenta")
    table.add_column("Duration", style="yellow", justify="right")

    for song in playlist:
        table.add_row(
            str(song.serial_number),
            song.name,
            song.artist,
            str(song.genre),
            format_duration(song.duration),
        )

    console.print(table)
    console.print(f"[dim]{len(playlist)} songs[/dim]")


def display_playlist_stats(playlist: Playlist) -> None:
    """Summarize song count, total length and genre spread."""
    total_seconds = sum(song.duration for song in playlist)
    genres = Counter(str(song.genre) for song in playlist)

    summary_table = Table(show_header=False, box=None, padding=(0, 2))
    summary_table.add_column(style="cyan")
    summary_table.add_column(style="green bold")
    summary_table.add_row("Songs", str(len(playlist)))
    summary_table.add_row("Total Duration", format_duration(total_seconds))
    console.print(summary_table)

    if genres:
        genre_table = Table(title="Genres")
        genre_table.add_column("Genre", style="magenta")
        genre_table.add_column("Songs", style="green", justify="right")
        for genre, count in genres.most_common():
            genre_table.add_row(genre, str(count))
        console.print(genre_table)
