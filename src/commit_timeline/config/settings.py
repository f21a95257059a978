"""Application settings using pydantic-settings.

This module provides environment variable support for configuration
using pydantic-settings. Settings can be overridden via environment
variables with the appropriate prefix.

Environment Variables:
    COMMIT_TIMELINE_LAYOUT_DEFAULT_SCALE: Time scale used when none is given
    COMMIT_TIMELINE_LAYOUT_DEFAULT_GROUP_BY: Grouping key used when none is given
    COMMIT_TIMELINE_LAYOUT_BUCKET_RESOLUTION: Number of collision buckets minus one
    COMMIT_TIMELINE_LAYOUT_EXCERPT_LENGTH: Maximum marker excerpt length
    COMMIT_TIMELINE_STORE_EVENTS_PATH: Default commit records file
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from commit_timeline.config.defaults import (
    BUCKET_RESOLUTION_MAX,
    BUCKET_RESOLUTION_MIN,
    DEFAULT_BUCKET_RESOLUTION,
    DEFAULT_EVENTS_PATH,
    DEFAULT_EXCERPT_LENGTH,
    DEFAULT_GROUP_BY,
    DEFAULT_TIME_SCALE,
    EXCERPT_LENGTH_MAX,
    EXCERPT_LENGTH_MIN,
)
from commit_timeline.models.enums import GroupBy, TimeScale

__all__ = [
    "LayoutSettings",
    "StoreSettings",
    "Settings",
    "get_settings",
]


class LayoutSettings(BaseSettings):
    """Settings for the layout engine and marker building.

    Attributes:
        default_scale: Time scale used when the caller gives none.
        default_group_by: Grouping key used when the caller gives none.
        bucket_resolution: Collision grid resolution (100 gives 101 buckets).
        excerpt_length: Maximum length of a marker excerpt before truncation.

    """

    model_config = SettingsConfigDict(
        env_prefix="COMMIT_TIMELINE_LAYOUT_",
        extra="ignore",
    )

    default_scale: TimeScale = Field(
        default=TimeScale(DEFAULT_TIME_SCALE),
        description="Time scale used when none is given",
    )
    default_group_by: GroupBy = Field(
        default=GroupBy(DEFAULT_GROUP_BY),
        description="Grouping key used when none is given",
    )
    bucket_resolution: int = Field(
        default=DEFAULT_BUCKET_RESOLUTION,
        ge=BUCKET_RESOLUTION_MIN,
        le=BUCKET_RESOLUTION_MAX,
        description="Collision grid resolution over the 0-100 axis",
    )
    excerpt_length: int = Field(
        default=DEFAULT_EXCERPT_LENGTH,
        ge=EXCERPT_LENGTH_MIN,
        le=EXCERPT_LENGTH_MAX,
        description="Maximum marker excerpt length before truncation",
    )


class StoreSettings(BaseSettings):
    """Settings for the file-backed event store.

    Attributes:
        events_path: Commit records file read when no path is given.

    """

    model_config = SettingsConfigDict(
        env_prefix="COMMIT_TIMELINE_STORE_",
        extra="ignore",
    )

    events_path: str = Field(
        default=DEFAULT_EVENTS_PATH,
        description="Commit records file (JSON or YAML)",
    )


class Settings(BaseSettings):
    """Root settings container.

    Aggregates all subsystem settings into a single configuration object.
    Use get_settings() to access the cached singleton instance.

    Attributes:
        layout: Layout engine settings.
        store: Event store settings.

    """

    model_config = SettingsConfigDict(
        env_prefix="COMMIT_TIMELINE_",
        extra="ignore",
    )

    layout: LayoutSettings = Field(default_factory=LayoutSettings)
    store: StoreSettings = Field(default_factory=StoreSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the cached settings singleton.

    Returns:
        The Settings instance with values from environment variables.

    """
    return Settings()
