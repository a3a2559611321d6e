"""Smoke tests for the CLI - command structure and end-to-end catalog runs."""

import json

import pytest
from typer.testing import CliRunner

from songbook.infrastructure.cli.app import app


@pytest.fixture
def runner():
    """CLI test runner."""
    return CliRunner()


@pytest.fixture
def catalog(tmp_path):
    """Catalog with A(3:20), B(1:40), C(5:00) and one duplicate of A."""
    path = tmp_path / "mix.json"
    path.write_text(
        json.dumps([
            {"name": "Alpha", "artist": "Ann", "genre": "rock", "duration": 200},
            {"name": "Bravo", "artist": "Bob", "genre": "jazz", "duration": "1:40"},
            {"name": "Charlie", "artist": "Ann", "genre": "pop", "duration": 300},
            {"name": "Alpha", "artist": "Ann", "genre": "rock", "duration": 200},
        ]),
        encoding="utf-8",
    )
    return path


class TestCoreCommandStructure:
    """Test that core command structure exists and is accessible."""

    def test_main_help_shows_commands(self, runner):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "show" in result.stdout
        assert "stats" in result.stdout
        assert "version" in result.stdout

    def test_version_command_works(self, runner):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "Songbook" in result.stdout

    def test_show_help(self, runner):
        result = runner.invoke(app, ["show", "--help"])
        assert result.exit_code == 0
        assert "--max-duration" in result.stdout


class TestShowCommand:
    """Run the show command against a catalog file."""

    def test_text_format_in_duration_order(self, runner, catalog):
        result = runner.invoke(
            app, ["show", str(catalog), "--order", "duration", "--format", "text"]
        )

        assert result.exit_code == 0
        assert (
            "[(Bravo, Bob, jazz, 1:40), (Alpha, Ann, rock, 3:20), "
            "(Charlie, Ann, pop, 5:00)]"
        ) in result.stdout

    def test_duration_filter(self, runner, catalog):
        result = runner.invoke(
            app,
            ["show", str(catalog), "-o", "duration", "-d", "2:30", "-f", "text"],
        )

        assert result.exit_code == 0
        assert "[(Bravo, Bob, jazz, 1:40)]" in result.stdout

    def test_json_format_with_artist_filter(self, runner, catalog):
        result = runner.invoke(
            app,
            ["show", str(catalog), "--artist", "Ann", "--order", "name", "--format", "json"],
        )

        assert result.exit_code == 0
        records = json.loads(result.stdout)
        assert [r["name"] for r in records] == ["Alpha", "Charlie"]
        assert [r["serial_number"] for r in records] == [1, 3]

    def test_table_format_lists_songs(self, runner, catalog):
        result = runner.invoke(app, ["show", str(catalog), "--genre", "jazz"])

        assert result.exit_code == 0
        assert "Bravo" in result.stdout
        assert "Charlie" not in result.stdout

    def test_unknown_genre_exits_with_error(self, runner, catalog):
        result = runner.invoke(app, ["show", str(catalog), "--genre", "polka"])

        assert result.exit_code == 1

    def test_missing_catalog_is_a_usage_error(self, runner, tmp_path):
        result = runner.invoke(app, ["show", str(tmp_path / "absent.json")])

        assert result.exit_code == 2


class TestStatsCommand:
    def test_stats_summarizes_catalog(self, runner, catalog):
        result = runner.invoke(app, ["stats", str(catalog)])

        assert result.exit_code == 0
        assert "Songs" in result.stdout
        assert "10:00" in result.stdout
        assert "rock" in result.stdout
