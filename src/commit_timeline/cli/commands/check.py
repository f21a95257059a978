"""Check command implementation.

This module implements the command that reports whether the store holds
any commits for a repository.
"""

from argparse import Namespace

from commit_timeline.cli.commands.base import BaseCommand, CommandResult
from commit_timeline.store.exceptions import EventStoreError

__all__ = ["CheckRepoCommand"]


class CheckRepoCommand(BaseCommand):
    """Command to check that a repository has commits."""

    @property
    def name(self) -> str:
        """Get the command name."""
        return "check"

    def execute(self, args: Namespace) -> CommandResult:
        """Execute the check command.

        Args:
            args: Parsed arguments with events file and repository.

        Returns:
            CommandResult with exit code 0 when the repository has commits
            and 1 otherwise.

        Raises:
            CommandError: If the store cannot be read.

        """
        repo_name = self._repo_name(args)
        store = self._open_store(args)

        try:
            exists = store.repo_exists(repo_name)
        except EventStoreError as e:
            raise self._wrap_store_error(e, repo_name) from e

        if exists:
            return CommandResult(exit_code=0, message=f"Repository found: {repo_name}")
        return CommandResult(
            exit_code=1, message=f"Repository not found: {repo_name}"
        )
