"""Domain layer test fixtures - Pure business objects with no dependencies.

Fast creation, no external dependencies, function-scoped for isolation.
"""

import pytest

from songbook.domain.entities import Genre, Playlist, Song


@pytest.fixture
def alpha():
    return Song(name="Alpha", artist="Artist A", genre=Genre.ROCK, duration=200)


@pytest.fixture
def bravo():
    return Song(name="Bravo", artist="Artist B", genre=Genre.JAZZ, duration=100)


@pytest.fixture
def charlie():
    return Song(name="Charlie", artist="Artist A", genre=Genre.POP, duration=300)


@pytest.fixture
def songs(alpha, bravo, charlie):
    """Three songs in insertion order A, B, C."""
    return [alpha, bravo, charlie]


@pytest.fixture
def playlist(songs):
    """Playlist holding A(serial 1), B(serial 2), C(serial 3)."""
    result = Playlist()
    for song in songs:
        result.add(song)
    return result


@pytest.fixture
def empty_playlist():
    """Empty playlist for edge case testing."""
    return Playlist()
