"""Core domain entities representing songs and playlists."""

from .errors import DuplicateEntryError, OutOfRangeError, PlaylistError

# Playlist-related entities
from .playlist import REMOVED_SERIAL_NUMBER, Playlist, PlaylistIterator
from .protocols import (
    FilteredSongIterable,
    OrderedSongIterable,
    PlaylistEntry,
    ScanningOrder,
)

# Song-related entities
from .song import Genre, Song, format_duration, parse_duration, to_genre

__all__ = [
    # Song entities
    "Genre",
    "Song",
    "format_duration",
    "parse_duration",
    "to_genre",
    # Playlist entities
    "Playlist",
    "PlaylistIterator",
    "REMOVED_SERIAL_NUMBER",
    # Contracts
    "FilteredSongIterable",
    "OrderedSongIterable",
    "PlaylistEntry",
    "ScanningOrder",
    # Errors
    "DuplicateEntryError",
    "OutOfRangeError",
    "PlaylistError",
]
