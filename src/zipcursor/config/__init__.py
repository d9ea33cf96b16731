"""Configuration module using Pydantic Settings.

Provides typed defaults for zips with environment variable support.

Usage:
    from zipcursor.config import ZipSettings, get_settings

    settings = ZipSettings(length_policy="strict")
"""

from zipcursor.config.settings import ZipSettings, get_settings

__all__ = [
    "ZipSettings",
    "get_settings",
]
