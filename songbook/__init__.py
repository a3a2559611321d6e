"""Songbook - ordered, filterable song playlists."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("songbook")
except PackageNotFoundError:
    # Development environment fallback
    __version__ = "0.1.0-dev"

__license__ = "MIT"
