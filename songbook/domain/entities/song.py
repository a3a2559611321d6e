"""Song entity and related value objects.

Pure song representation with zero external dependencies beyond attrs.
"""

from enum import StrEnum, auto
import re

import attrs
from attrs import define, field, validators

_CLOCK_PATTERN = re.compile(r"^(\d+):([0-5]\d)$")


class Genre(StrEnum):
    """Genres a song can be filed under."""

    POP = auto()
    ROCK = auto()
    HIP_HOP = auto()
    JAZZ = auto()
    CLASSICAL = auto()
    ELECTRONIC = auto()
    COUNTRY = auto()
    BLUES = auto()
    METAL = auto()
    FOLK = auto()


def to_genre(value: Genre | str) -> Genre:
    """Convert a genre name such as "Hip Hop" or "hip-hop" to a Genre."""
    if isinstance(value, Genre):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Genre must be a string, got {type(value).__name__}")
    normalized = re.sub(r"[\s\-]+", "_", value.strip().lower())
    try:
        return Genre(normalized)
    except ValueError:
        raise ValueError(f"Unknown genre: {value!r}") from None


def parse_duration(value: int | str) -> int:
    """Parse a duration given as seconds or as an "m:ss" clock string."""
    if isinstance(value, bool):
        raise TypeError("Duration must be an int or 'm:ss' string")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"Duration cannot be negative: {value}")
        return value
    if not isinstance(value, str):
        raise TypeError("Duration must be an int or 'm:ss' string")

    text = value.strip()
    if text.isdigit():
        return int(text)
    match = _CLOCK_PATTERN.match(text)
    if not match:
        raise ValueError(f"Invalid duration: {value!r}")
    minutes, seconds = match.groups()
    return int(minutes) * 60 + int(seconds)


def format_duration(seconds: int) -> str:
    """Render seconds as "m:ss"."""
    minutes, rest = divmod(seconds, 60)
    return f"{minutes}:{rest:02d}"


@define(slots=True, unsafe_hash=True)
class Song:
    """A single track that can be placed in a playlist.

    Equality and hashing use name, artist, genre and duration. The serial
    number is owned by whichever playlist holds the song and is mutated by
    it: playlists assign it on add and reset it to -1 on remove.
    """

    name: str = field(validator=validators.instance_of(str))
    artist: str = field(validator=validators.instance_of(str))
    genre: Genre = field(converter=to_genre)
    duration: int = field(
        validator=[validators.instance_of(int), validators.ge(0)],
    )
    serial_number: int = field(default=-1, eq=False)

    def clone(self) -> "Song | None":
        """Create an independent copy that belongs to no playlist."""
        return attrs.evolve(self, serial_number=-1)

    def is_excluded_by_filter(
        self,
        artist: str | None,
        genre: Genre | str | None,
        max_duration: int,
    ) -> bool:
        """Check whether any of the given filters rejects this song.

        Args:
            artist: Required artist, or None/"" for no constraint
            genre: Required genre, or None for no constraint
            max_duration: Longest allowed duration in seconds, 0 for no limit

        Returns:
            True if the song fails at least one set filter
        """
        if artist and artist != self.artist:
            return True
        if genre is not None and to_genre(genre) != self.genre:
            return True
        return max_duration > 0 and self.duration > max_duration

    def __str__(self) -> str:
        return f"{self.name}, {self.artist}, {self.genre}, {format_duration(self.duration)}"
