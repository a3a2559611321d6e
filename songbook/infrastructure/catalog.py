"""Load song catalogs from JSON files.

A catalog is a JSON array of objects:

    [
        {"name": "Hey Jude", "artist": "The Beatles", "genre": "rock", "duration": "7:11"},
        {"name": "So What", "artist": "Miles Davis", "genre": "jazz", "duration": 562}
    ]

Durations are seconds or "m:ss" strings.
"""

from collections.abc import Iterable
import json
from pathlib import Path
from typing import Any

from songbook.config import get_logger
from songbook.domain.entities import (
    DuplicateEntryError,
    Playlist,
    Song,
    parse_duration,
)

logger = get_logger(__name__)

REQUIRED_KEYS = ("name", "artist", "genre", "duration")


class CatalogError(ValueError):
    """Catalog file is missing, unreadable, or has malformed entries."""


def song_from_dict(data: dict[str, Any]) -> Song:
    """Build a Song from one catalog entry."""
    missing = [key for key in REQUIRED_KEYS if key not in data]
    if missing:
        raise CatalogError(f"missing keys: {', '.join(missing)}")

    try:
        return Song(
            name=data["name"],
            artist=data["artist"],
            genre=data["genre"],
            duration=parse_duration(data["duration"]),
        )
    except (TypeError, ValueError) as e:
        raise CatalogError(str(e)) from e


def load_catalog(path: Path | str) -> list[Song]:
    """Read every song of a JSON catalog file.

    Raises:
        CatalogError: The file cannot be read or any entry is malformed;
            the message names the offending entry index
    """
    catalog_path = Path(path)
    try:
        raw = json.loads(catalog_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise CatalogError(f"Cannot read catalog {catalog_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Invalid JSON in {catalog_path}: {e}") from e

    if not isinstance(raw, list):
        raise CatalogError(f"Catalog {catalog_path} must contain a JSON array")

    songs = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise CatalogError(f"Entry {index} must be an object")
        try:
            songs.append(song_from_dict(entry))
        except CatalogError as e:
            raise CatalogError(f"Entry {index}: {e}") from e

    logger.debug(f"Loaded {len(songs)} songs from {catalog_path}")
    return songs


def build_playlist(songs: Iterable[Song]) -> Playlist:
    """Add songs to a new playlist in order, skipping duplicates."""
    playlist = Playlist()
    for song in songs:
        try:
            playlist.add(song)
        except DuplicateEntryError:
            logger.info(f"Skipping duplicate song: {song}")
    return playlist
