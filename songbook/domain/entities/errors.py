"""Domain errors raised by playlist operations."""


class PlaylistError(Exception):
    """Base class for playlist domain errors."""


class DuplicateEntryError(PlaylistError):
    """An equal song is already part of the playlist."""

    def __init__(self, song: object) -> None:
        super().__init__(f"Song already exists in playlist: {song}")
        self.song = song


class OutOfRangeError(PlaylistError, StopIteration):
    """Playlist iterator advanced past its last song.

    Subclasses StopIteration so exhausting the iterator in a ``for`` loop
    terminates normally.
    """

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"No song at position {index} (playlist has {size})")
        self.index = index
        self.size = size
