"""CLI command implementations.

This module exports the command classes for the CLI.
"""

from commit_timeline.cli.commands.base import BaseCommand, CommandResult
from commit_timeline.cli.commands.check import CheckRepoCommand
from commit_timeline.cli.commands.layout import LayoutCommand

__all__ = [
    "BaseCommand",
    "CheckRepoCommand",
    "CommandResult",
    "LayoutCommand",
]
