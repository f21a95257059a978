"""CLI package for commit-timeline.

This package provides the command-line interface for laying out a
repository's commits. It implements the Command pattern for the
operations it supports (layout, repository check).
"""

from commit_timeline.cli.commands import (
    BaseCommand,
    CheckRepoCommand,
    CommandResult,
    LayoutCommand,
)
from commit_timeline.cli.formatters import format_layout, layout_to_dict
from commit_timeline.cli.main import CommandDispatcher, main
from commit_timeline.cli.parser import create_parser
from commit_timeline.cli.validators import validate_args

__all__ = [
    "BaseCommand",
    "CheckRepoCommand",
    "CommandDispatcher",
    "CommandResult",
    "create_parser",
    "format_layout",
    "layout_to_dict",
    "LayoutCommand",
    "main",
    "validate_args",
]
