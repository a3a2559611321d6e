"""Pure functional transformations for song sequences."""

from .core import (
    SORT_KEYS,
    Transform,
    create_pipeline,
    filter_by_predicate,
    filter_songs,
    sort_songs,
)

__all__ = [
    "SORT_KEYS",
    # Core pipeline functions
    "Transform",
    "create_pipeline",
    # Song filtering
    "filter_by_predicate",
    "filter_songs",
    # Song sorting
    "sort_songs",
]
