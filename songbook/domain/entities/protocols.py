"""Contracts between the playlist and the songs it holds.

The playlist never defines song equality or filtering itself; it relies on
the capabilities described by ``PlaylistEntry``.
"""

from enum import Enum
from typing import Any, Protocol


class ScanningOrder(Enum):
    """Sort key applied by ``OrderedSongIterable.reorder``."""

    INSERTION = "insertion"  # ascending serial number
    NAME = "name"  # name, then artist
    DURATION = "duration"  # duration, then name, then artist


class PlaylistEntry(Protocol):
    """Protocol for song objects stored in a playlist."""

    serial_number: int

    @property
    def name(self) -> str:
        """Song name."""
        ...

    @property
    def artist(self) -> str:
        """Performing artist."""
        ...

    @property
    def genre(self) -> Any:
        """Song genre."""
        ...

    @property
    def duration(self) -> int:
        """Length in seconds."""
        ...

    def clone(self) -> "PlaylistEntry | None":
        """Return an independent copy, or None when the song cannot be copied."""
        ...

    def is_excluded_by_filter(
        self,
        artist: str | None,
        genre: Any,
        max_duration: int,
    ) -> bool:
        """Return True when any set filter rejects this song."""
        ...


class FilteredSongIterable(Protocol):
    """Collections whose next reorder can be narrowed by pending filters."""

    def set_artist_filter(self, artist: str | None) -> None: ...

    def set_genre_filter(self, genre: Any) -> None: ...

    def set_duration_filter(self, max_duration: int) -> None: ...


class OrderedSongIterable(Protocol):
    """Collections that can be re-sorted by a ScanningOrder."""

    def reorder(self, order: ScanningOrder) -> None: ...
