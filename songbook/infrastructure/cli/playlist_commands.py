"""Playlist commands for Songbook CLI."""

from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer

from songbook.config import get_logger, settings
from songbook.domain.entities import ScanningOrder, parse_duration, to_genre
from songbook.infrastructure.catalog import build_playlist, load_catalog
from songbook.infrastructure.cli.ui import (
    command_error_handler,
    display_playlist,
    display_playlist_stats,
)

logger = get_logger(__name__)


class FormatOption(StrEnum):
    TABLE = "table"
    JSON = "json"
    TEXT = "text"


CatalogArgument = Annotated[
    Path,
    typer.Argument(
        exists=True,
        dir_okay=False,
        readable=True,
        help="JSON catalog of songs",
    ),
]


def register_playlist_commands(app: typer.Typer) -> None:
    """Register playlist commands with the Typer app."""
    app.command(
        name="show",
        help="Filter and order a song catalog",
        rich_help_panel="🎵 Playlists",
    )(show)
    app.command(
        name="stats",
        help="Summarize a song catalog",
        rich_help_panel="🎵 Playlists",
    )(stats)


@command_error_handler
def show(
    catalog: CatalogArgument,
    order: Annotated[
        ScanningOrder | None,
        typer.Option("--order", "-o", help="Scanning order"),
    ] = None,
    artist: Annotated[
        str | None,
        typer.Option("--artist", "-a", help="Only songs by this artist"),
    ] = None,
    genre: Annotated[
        str | None,
        typer.Option("--genre", "-g", help="Only songs of this genre"),
    ] = None,
    max_duration: Annotated[
        str | None,
        typer.Option(
            "--max-duration", "-d", help="Longest duration, seconds or m:ss"
        ),
    ] = None,
    output_format: Annotated[
        FormatOption | None,
        typer.Option("--format", "-f", help="Output format"),
    ] = None,
) -> None:
    """Load a catalog, apply filters, and print the reordered playlist."""
    playlist = build_playlist(load_catalog(catalog))

    if artist:
        playlist.set_artist_filter(artist)
    if genre:
        playlist.set_genre_filter(to_genre(genre))
    if max_duration:
        playlist.set_duration_filter(parse_duration(max_duration))

    scanning_order = order or ScanningOrder(settings.playlist.default_order)
    playlist.reorder(scanning_order)
    logger.debug(f"Showing {len(playlist)} songs from {catalog}")

    display_playlist(
        playlist,
        title=f"{catalog.stem} ({scanning_order.value} order)",
        output_format=output_format or settings.playlist.default_format,
    )


@command_error_handler
def stats(catalog: CatalogArgument) -> None:
    """Print song count, total duration and genre spread of a catalog."""
    display_playlist_stats(build_playlist(load_catalog(catalog)))
