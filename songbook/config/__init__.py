"""Configuration module for Songbook.

Public API:
----------
settings: Settings instance
    Pydantic settings object with nested configuration

get_config(key: str, default=None) -> Any
    Flat-key configuration access

get_logger(name: str) -> Logger
    Get a context-aware logger for your module

setup_loguru_logger(verbose: bool = False) -> None
    Configure Loguru logger for the application

Usage:
------
```python
from songbook.config import settings
order = settings.playlist.default_order

from songbook.config import get_logger
logger = get_logger(__name__)
logger.debug("Reordered playlist")
```
"""

from .logging import get_logger, setup_loguru_logger
from .settings import get_config, settings

__all__ = [
    "get_config",
    "get_logger",
    "settings",
    "setup_loguru_logger",
]
