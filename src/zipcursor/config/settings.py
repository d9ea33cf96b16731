"""Configuration settings using Pydantic Settings.

Provides typed defaults for zips with environment variable support.

Usage:
    from zipcursor.config import ZipSettings

    # Load from environment variables (ZIPCURSOR_*)
    settings = ZipSettings()

    # Or override with explicit values
    settings = ZipSettings(length_policy="strict")
    Zip(a, b, settings=settings)
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from zipcursor.core.types import LengthPolicy, Ownership


class ZipSettings(BaseSettings):  # type: ignore[misc]
    """Defaults for Zip and PairedRange construction.

    Attributes:
        length_policy: Termination rule for sequences of unequal length.
        default_ownership: Ownership of sources passed without Owned/Borrowed.
        buffer_iterators: Give plain iterables multi-pass (FORWARD) cursors;
            when False they get single-pass (INPUT) cursors.
        deep_copy_owned: Deep-copy owned sources instead of shallow-copying.

    Environment Variables:
        ZIPCURSOR_LENGTH_POLICY (shortest | strict)
        ZIPCURSOR_DEFAULT_OWNERSHIP (borrowed | owned)
        ZIPCURSOR_BUFFER_ITERATORS
        ZIPCURSOR_DEEP_COPY_OWNED
    """

    model_config = SettingsConfigDict(
        env_prefix="ZIPCURSOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    length_policy: LengthPolicy = LengthPolicy.SHORTEST
    default_ownership: Ownership = Ownership.BORROWED
    buffer_iterators: bool = True
    deep_copy_owned: bool = False


@lru_cache(maxsize=1)
def get_settings() -> ZipSettings:
    """Process-wide settings, read from the environment once."""
    return ZipSettings()
