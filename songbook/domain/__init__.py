"""Songbook domain layer - songs, playlists and the transforms between them."""

# Export all domain components
from . import entities, transforms

# Re-export key types for convenience
from .entities import (
    DuplicateEntryError,
    Genre,
    OutOfRangeError,
    Playlist,
    PlaylistError,
    ScanningOrder,
    Song,
)
from .transforms import (
    Transform,
    create_pipeline,
    filter_by_predicate,
    filter_songs,
    sort_songs,
)

__all__ = [
    # Modules
    "entities",
    "transforms",
    # Key domain types
    "Genre",
    "Song",
    "Playlist",
    "ScanningOrder",
    # Errors
    "DuplicateEntryError",
    "OutOfRangeError",
    "PlaylistError",
    # Transform functions
    "Transform",
    "create_pipeline",
    "filter_by_predicate",
    "filter_songs",
    "sort_songs",
]
