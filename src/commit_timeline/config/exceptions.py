"""Exceptions for config module.

This module defines exceptions related to configuration values
and their validation.
"""

from commit_timeline.exceptions import CommitTimelineError

__all__ = ["ConfigurationError", "UnsupportedConfigurationError"]


class ConfigurationError(CommitTimelineError):
    """Base exception for configuration-related errors."""

    pass


class UnsupportedConfigurationError(ConfigurationError):
    """Raised when a time scale or grouping key is outside its enumeration."""

    pass
