"""Configuration management for the SQL dump extractor.

Usage:
    >>> from sql_dump_extractor.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.dump_encoding)
"""

from sql_dump_extractor.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
