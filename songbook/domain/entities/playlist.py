"""Playlist entity: an ordered, filterable collection of songs.

Unlike the immutable song value objects, a Playlist is a mutable aggregate.
It keeps two separate lists:

- the origin, holding every song the playlist owns in insertion order
- the working view, which is what iteration, equality, rendering and cloning
  see, and which ``reorder`` replaces with a filtered and sorted copy of the
  origin

Filters are pending parameters consumed by the next ``reorder``; they never
accumulate across calls.
"""

from collections.abc import Iterator
from typing import Any, cast

from attrs import define, field

from songbook.config import get_logger
from songbook.domain.transforms.core import create_pipeline, filter_songs, sort_songs

from .errors import DuplicateEntryError, OutOfRangeError
from .protocols import PlaylistEntry, ScanningOrder

logger = get_logger(__name__)

REMOVED_SERIAL_NUMBER = -1


class PlaylistIterator(Iterator[PlaylistEntry]):
    """Forward-only cursor over a playlist's working view."""

    def __init__(self, songs: list[PlaylistEntry]) -> None:
        self._songs = songs
        self._index = 0

    def has_next(self) -> bool:
        return self._index < len(self._songs)

    def __next__(self) -> PlaylistEntry:
        if not self.has_next():
            raise OutOfRangeError(self._index, len(self._songs))
        song = self._songs[self._index]
        self._index += 1
        return song


@define(eq=False, slots=True)
class Playlist:
    """Ordered collection of unique songs with filtering and re-ordering.

    The playlist shares song objects with its caller and may mutate the
    serial number of any song it holds or held.
    """

    _origin: list[PlaylistEntry] = field(factory=list, init=False, repr=False)
    _songs: list[PlaylistEntry] = field(factory=list, init=False)
    _total_ever_added: int = field(default=0, init=False)

    # Pending filters, consumed by reorder()
    _filter_artist: str | None = field(default=None, init=False, repr=False)
    _filter_genre: Any = field(default=None, init=False, repr=False)
    _filter_max_duration: int = field(default=0, init=False, repr=False)

    # === Mutation ===

    def add(self, song: PlaylistEntry) -> None:
        """Append a song and stamp it with the next serial number.

        Raises:
            DuplicateEntryError: An equal song is already in the playlist
        """
        if song in self._origin:
            raise DuplicateEntryError(song)

        self._origin.append(song)
        self._songs.append(song)
        self._total_ever_added += 1
        song.serial_number = self._total_ever_added
        logger.debug(f"Added song #{song.serial_number}: {song}")

    def remove(self, song: PlaylistEntry) -> bool:
        """Remove the song equal to ``song`` from the working view.

        Returns:
            True if a song was removed, False if no equal song was present
        """
        try:
            index = self._songs.index(song)
        except ValueError:
            return False

        removed = self._songs.pop(index)
        self._origin.remove(removed)
        removed.serial_number = REMOVED_SERIAL_NUMBER
        logger.debug(f"Removed song: {removed}")
        return True

    # === Filter configuration ===

    def set_artist_filter(self, artist: str | None) -> None:
        """Keep only songs by ``artist`` on the next reorder."""
        self._filter_artist = artist

    def set_genre_filter(self, genre: Any) -> None:
        """Keep only songs of ``genre`` on the next reorder."""
        self._filter_genre = genre

    def set_duration_filter(self, max_duration: int) -> None:
        """Keep only songs no longer than ``max_duration`` seconds; 0 disables."""
        if max_duration < 0:
            raise ValueError(f"Duration filter cannot be negative: {max_duration}")
        self._filter_max_duration = max_duration

    def _reset_filters(self) -> None:
        self._filter_artist = None
        self._filter_genre = None
        self._filter_max_duration = 0

    # === Filter + sort pipeline ===

    def reorder(self, order: ScanningOrder) -> None:
        """Rebuild the working view from the origin.

        Applies the pending filters to a copy of the origin, sorts the
        survivors by ``order`` and makes the result the working view. The
        pending filters are cleared afterwards.
        """
        pipeline = create_pipeline(
            filter_songs(
                self._filter_artist,
                self._filter_genre,
                self._filter_max_duration,
            ),
            sort_songs(order),
        )
        self._songs = cast("list[PlaylistEntry]", pipeline(list(self._origin)))
        self._reset_filters()
        logger.debug(
            f"Reordered playlist by {order.value}: {len(self._songs)} of {len(self._origin)} songs"
        )

    # === Accessors ===

    @property
    def count(self) -> int:
        """Number of songs in the working view."""
        return len(self._songs)

    @property
    def total_ever_added(self) -> int:
        return self._total_ever_added

    @property
    def songs(self) -> tuple[PlaylistEntry, ...]:
        """Snapshot of the working view in current order."""
        return tuple(self._songs)

    @property
    def origin(self) -> tuple[PlaylistEntry, ...]:
        """Snapshot of every owned song in insertion order."""
        return tuple(self._origin)

    @property
    def pending_filters(self) -> tuple[str | None, Any, int]:
        """Artist, genre and duration filters waiting for the next reorder."""
        return (self._filter_artist, self._filter_genre, self._filter_max_duration)

    def __len__(self) -> int:
        return len(self._songs)

    def __contains__(self, song: object) -> bool:
        return song in self._songs

    def __iter__(self) -> PlaylistIterator:
        return PlaylistIterator(self._songs)

    # === Equality, hashing, rendering ===

    def __eq__(self, other: object) -> bool:
        # Counts every matching pair, so the result depends on which side
        # holds duplicates by value. Not a multiset comparison.
        if not isinstance(other, Playlist):
            return NotImplemented
        matches = sum(
            1 for mine in self._songs for theirs in other._songs if mine == theirs
        )
        return matches == len(self._songs)

    def __hash__(self) -> int:
        return sum(hash(song) for song in self._songs)

    def __str__(self) -> str:
        return "[" + ", ".join(f"({song})" for song in self._songs) + "]"

    # === Cloning ===

    def clone(self) -> "Playlist | None":
        """Copy the working view into a new playlist of cloned songs.

        Serial numbers of the copy are re-derived 1..N in current order.

        Returns:
            The new playlist, or None if any song failed to clone
        """
        copy = Playlist()
        for song in self._songs:
            song_copy = song.clone()
            if song_copy is None:
                logger.warning(f"Playlist clone aborted: song could not be cloned: {song}")
                return None
            copy.add(song_copy)
        return copy
