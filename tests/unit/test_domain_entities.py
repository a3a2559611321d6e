"""Tests for the Song entity and its value helpers."""

import pytest

from songbook.domain.entities import (
    Genre,
    Song,
    format_duration,
    parse_duration,
    to_genre,
)


class TestSong:
    """Test Song creation, equality and copying."""

    def test_song_creation(self):
        song = Song(name="So What", artist="Miles Davis", genre=Genre.JAZZ, duration=562)

        assert song.name == "So What"
        assert song.artist == "Miles Davis"
        assert song.genre is Genre.JAZZ
        assert song.duration == 562
        assert song.serial_number == -1

    def test_genre_is_converted_from_string(self):
        song = Song(name="Juicy", artist="The Notorious B.I.G.", genre="Hip Hop", duration=305)
        assert song.genre is Genre.HIP_HOP

    def test_invalid_fields_are_rejected(self):
        with pytest.raises(TypeError):
            Song(name=7, artist="Artist", genre=Genre.POP, duration=100)
        with pytest.raises(ValueError):
            Song(name="Song", artist="Artist", genre=Genre.POP, duration=-5)
        with pytest.raises(ValueError):
            Song(name="Song", artist="Artist", genre="polka", duration=100)

    def test_equality_ignores_serial_number(self):
        first = Song(name="Song", artist="Artist", genre=Genre.POP, duration=100)
        second = Song(name="Song", artist="Artist", genre=Genre.POP, duration=100)
        second.serial_number = 12

        assert first == second
        assert hash(first) == hash(second)

    def test_equality_uses_every_descriptive_field(self):
        base = Song(name="Song", artist="Artist", genre=Genre.POP, duration=100)

        assert base != Song(name="Other", artist="Artist", genre=Genre.POP, duration=100)
        assert base != Song(name="Song", artist="Other", genre=Genre.POP, duration=100)
        assert base != Song(name="Song", artist="Artist", genre=Genre.ROCK, duration=100)
        assert base != Song(name="Song", artist="Artist", genre=Genre.POP, duration=101)

    def test_clone_is_an_equal_detached_copy(self):
        song = Song(name="Song", artist="Artist", genre=Genre.POP, duration=100)
        song.serial_number = 4

        copy = song.clone()

        assert copy == song
        assert copy is not song
        assert copy.serial_number == -1
        assert song.serial_number == 4

    def test_string_rendering(self):
        song = Song(name="Hey Jude", artist="The Beatles", genre=Genre.ROCK, duration=431)
        assert str(song) == "Hey Jude, The Beatles, rock, 7:11"


class TestSongFilterPredicate:
    """Test is_excluded_by_filter."""

    @pytest.fixture
    def song(self):
        return Song(name="Song", artist="Artist", genre=Genre.ROCK, duration=200)

    def test_unset_filters_exclude_nothing(self, song):
        assert not song.is_excluded_by_filter(None, None, 0)
        assert not song.is_excluded_by_filter("", None, 0)

    @pytest.mark.parametrize(
        ("artist", "genre", "max_duration", "excluded"),
        [
            ("Artist", None, 0, False),
            ("Someone", None, 0, True),
            (None, Genre.ROCK, 0, False),
            (None, "rock", 0, False),
            (None, Genre.JAZZ, 0, True),
            (None, None, 200, False),
            (None, None, 199, True),
            ("Artist", Genre.ROCK, 250, False),
            ("Artist", Genre.ROCK, 150, True),
        ],
    )
    def test_set_filters(self, song, artist, genre, max_duration, excluded):
        assert song.is_excluded_by_filter(artist, genre, max_duration) is excluded


class TestDurationHelpers:
    """Test duration parsing and formatting."""

    def test_parse_seconds(self):
        assert parse_duration(185) == 185
        assert parse_duration("185") == 185

    def test_parse_clock_string(self):
        assert parse_duration("3:05") == 185
        assert parse_duration(" 12:00 ") == 720

    @pytest.mark.parametrize("value", ["3:75", "abc", "1:2:3", "-4"])
    def test_parse_rejects_malformed_strings(self, value):
        with pytest.raises(ValueError):
            parse_duration(value)

    def test_parse_rejects_other_types(self):
        with pytest.raises(TypeError):
            parse_duration(True)
        with pytest.raises(TypeError):
            parse_duration(3.5)

    def test_format(self):
        assert format_duration(0) == "0:00"
        assert format_duration(65) == "1:05"
        assert format_duration(3600) == "60:00"


class TestGenre:
    def test_to_genre_normalizes_names(self):
        assert to_genre("ROCK") is Genre.ROCK
        assert to_genre("hip-hop") is Genre.HIP_HOP
        assert to_genre(Genre.FOLK) is Genre.FOLK

    def test_to_genre_rejects_unknown(self):
        with pytest.raises(ValueError, match="Unknown genre"):
            to_genre("polka")
