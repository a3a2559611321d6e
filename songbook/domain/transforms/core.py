"""
Pure functional transformations for song sequences.

These primitives back the playlist filter and sort pipeline. Every transform
returns a new list and never mutates its input, so a playlist can run them
over a copy of its origin without disturbing it.

Transformations follow the same conventions:
- Currying: Functions can be partially applied and composed later
- Composition: create_pipeline chains transforms left to right
- Purity: No side effects on the songs or the input sequence
"""

from collections.abc import Callable, Sequence
from typing import Any, cast

from toolz import compose_left, curry

from songbook.config import get_logger
from songbook.domain.entities.protocols import PlaylistEntry, ScanningOrder

logger = get_logger(__name__)

# Type alias for transformation functions
Transform = Callable[[Sequence[PlaylistEntry]], list[PlaylistEntry]]


# === Core Pipeline Functions ===


def create_pipeline(*operations: Transform) -> Transform:
    """
    Compose multiple transformations into a single operation.

    Args:
        *operations: Transformation functions to compose, applied left to right

    Returns:
        A single transformation function combining all operations
    """
    return compose_left(*operations)


# === Song Filtering ===


@curry
def filter_by_predicate(
    predicate: Callable[[PlaylistEntry], bool],
    songs: Sequence[PlaylistEntry] | None = None,
) -> Transform | list[PlaylistEntry]:
    """
    Keep the songs for which a predicate holds.

    Args:
        predicate: Function returning True for songs to keep
        songs: Optional sequence to transform immediately

    Returns:
        Transformation function or filtered list if songs provided
    """

    def transform(s: Sequence[PlaylistEntry]) -> list[PlaylistEntry]:
        return [song for song in s if predicate(song)]

    return transform(songs) if songs is not None else transform


@curry
def filter_songs(
    artist: str | None = None,
    genre: Any = None,
    max_duration: int = 0,
    songs: Sequence[PlaylistEntry] | None = None,
) -> Transform | list[PlaylistEntry]:
    """
    Drop songs rejected by the artist, genre or duration filter.

    Unset filters (None artist, None genre, zero duration) impose no
    constraint; set filters are combined with logical AND.

    Args:
        artist: Required artist
        genre: Required genre
        max_duration: Longest allowed duration in seconds, 0 for no limit
        songs: Optional sequence to transform immediately

    Returns:
        Transformation function or filtered list if songs provided
    """

    def passes(song: PlaylistEntry) -> bool:
        return not song.is_excluded_by_filter(artist, genre, max_duration)

    def transform(s: Sequence[PlaylistEntry]) -> list[PlaylistEntry]:
        kept = cast("list[PlaylistEntry]", filter_by_predicate(passes, s))
        if len(kept) != len(s):
            logger.debug(
                f"Filter removed {len(s) - len(kept)} of {len(s)} songs "
                f"(artist={artist!r}, genre={genre!r}, max_duration={max_duration})"
            )
        return kept

    return transform(songs) if songs is not None else transform


# === Song Sorting ===


def _by_name(song: PlaylistEntry) -> tuple[str, str]:
    return (song.name, song.artist)


def _by_duration(song: PlaylistEntry) -> tuple[int, str, str]:
    return (song.duration, *_by_name(song))


def _by_serial_number(song: PlaylistEntry) -> int:
    return song.serial_number


SORT_KEYS: dict[ScanningOrder, Callable[[PlaylistEntry], Any]] = {
    ScanningOrder.INSERTION: _by_serial_number,
    ScanningOrder.NAME: _by_name,
    ScanningOrder.DURATION: _by_duration,
}


@curry
def sort_songs(
    order: ScanningOrder,
    songs: Sequence[PlaylistEntry] | None = None,
) -> Transform | list[PlaylistEntry]:
    """
    Sort songs by the key chain of a scanning order.

    INSERTION sorts by serial number, NAME by name then artist, and DURATION
    by duration then name then artist. The sort is stable.

    Args:
        order: Scanning order selecting the sort key
        songs: Optional sequence to transform immediately

    Returns:
        Transformation function or sorted list if songs provided
    """
    try:
        key_fn = SORT_KEYS[order]
    except KeyError:
        raise ValueError(f"Invalid scanning order: {order!r}") from None

    def transform(s: Sequence[PlaylistEntry]) -> list[PlaylistEntry]:
        return sorted(s, key=key_fn)

    return transform(songs) if songs is not None else transform
