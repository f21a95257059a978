"""Layout command implementation.

This module implements the command that loads a repository's commits and
runs a complete timeline layout pass over them.
"""

from argparse import Namespace

from commit_timeline.cli.commands.base import BaseCommand, CommandResult
from commit_timeline.config.settings import get_settings
from commit_timeline.engine.timeline import build_timeline
from commit_timeline.logging_config import get_logger
from commit_timeline.store.exceptions import EventStoreError

__all__ = ["LayoutCommand"]

logger = get_logger(__name__)


class LayoutCommand(BaseCommand):
    """Command to lay out a repository's commits on a timeline."""

    @property
    def name(self) -> str:
        """Get the command name."""
        return "layout"

    def execute(self, args: Namespace) -> CommandResult:
        """Execute the layout command.

        Args:
            args: Parsed arguments with events file, repository and layout
                options.

        Returns:
            CommandResult carrying the layout.

        Raises:
            CommandError: If the commits cannot be loaded.

        """
        layout_settings = get_settings().layout
        repo_name = self._repo_name(args)
        store = self._open_store(args)

        try:
            events = store.fetch_events(repo_name)
        except EventStoreError as e:
            raise self._wrap_store_error(e, repo_name) from e

        layout = build_timeline(
            events,
            getattr(args, "scale", None) or layout_settings.default_scale,
            getattr(args, "group_by", None) or layout_settings.default_group_by,
            resolution=getattr(args, "resolution", None)
            or layout_settings.bucket_resolution,
        )

        logger.info(
            "timeline_built",
            repo_name=repo_name,
            event_count=layout.event_count,
            row_count=len(layout.rows),
        )

        message = None
        if not events:
            logger.warning("no_commits_found", repo_name=repo_name)
            message = f"No commits found for {repo_name}"

        return CommandResult(exit_code=0, layout=layout, message=message)
