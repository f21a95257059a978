"""Base command class for CLI commands.

This module defines the abstract base class for CLI commands
following the Command pattern.
"""

from abc import ABC, abstractmethod
from argparse import Namespace
from pathlib import Path

from commit_timeline.cli.exceptions import CommandError
from commit_timeline.config.settings import get_settings
from commit_timeline.models.base import BaseSchema
from commit_timeline.models.layout import TimelineLayout
from commit_timeline.store.exceptions import EventStoreError
from commit_timeline.store.json_store import JsonEventStore
from commit_timeline.store.repository import resolve_repo_name

__all__ = ["BaseCommand", "CommandResult"]


class CommandResult(BaseSchema):
    """Result of a command execution.

    Attributes:
        exit_code: Exit code for the CLI (0 for success).
        layout: Timeline layout produced by the command, if any.
        message: Optional message to display.

    """

    exit_code: int
    layout: TimelineLayout | None = None
    message: str | None = None


class BaseCommand(ABC):
    """Abstract base class for CLI commands.

    All CLI commands should inherit from this class and implement
    the execute method.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the command name for logging and display."""
        pass

    @abstractmethod
    def execute(self, args: Namespace) -> CommandResult:
        """Execute the command.

        Args:
            args: Parsed command-line arguments.

        Returns:
            CommandResult with exit code and any layout.

        Raises:
            CommandError: If the command cannot complete.

        """
        pass

    def _open_store(self, args: Namespace) -> JsonEventStore:
        """Build the event store named by the arguments or the settings."""
        path = getattr(args, "events", None) or get_settings().store.events_path
        return JsonEventStore(Path(path))

    def _repo_name(self, args: Namespace) -> str:
        """Resolve the repository name from the arguments.

        Raises:
            CommandError: If no repository name can be extracted.

        """
        repo_name = resolve_repo_name(getattr(args, "repo", "") or "")
        if not repo_name:
            raise CommandError(
                f"Could not extract repository name from {args.repo!r}"
            )
        return repo_name

    def _wrap_store_error(self, error: EventStoreError, repo_name: str) -> CommandError:
        """Turn a store failure into a command failure."""
        return CommandError(f"Failed to load commits for {repo_name}: {error}")
