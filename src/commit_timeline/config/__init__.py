"""Configuration module for commit-timeline.

Provides centralized settings via pydantic-settings and the validators
that turn raw time scale and grouping values into enumeration members.
"""

from commit_timeline.config.exceptions import (
    ConfigurationError,
    UnsupportedConfigurationError,
)
from commit_timeline.config.settings import (
    LayoutSettings,
    Settings,
    StoreSettings,
    get_settings,
)
from commit_timeline.config.validators import resolve_group_by, resolve_time_scale

__all__ = [
    "ConfigurationError",
    "get_settings",
    "LayoutSettings",
    "resolve_group_by",
    "resolve_time_scale",
    "Settings",
    "StoreSettings",
    "UnsupportedConfigurationError",
]
