"""Exceptions for the CLI module.

This module defines exceptions specific to CLI operations.
"""

from commit_timeline.exceptions import CommitTimelineError

__all__ = [
    "CLIError",
    "CommandError",
]


class CLIError(CommitTimelineError):
    """Base exception for CLI-related errors."""

    pass


class CommandError(CLIError):
    """Raised when a command execution fails."""

    pass
