"""CLI main entry point.

This module provides the main entry point for the commit-timeline CLI.
"""

import argparse
import sys
import traceback

from commit_timeline.cli.commands import CheckRepoCommand, LayoutCommand
from commit_timeline.cli.formatters import format_layout
from commit_timeline.cli.parser import create_parser
from commit_timeline.cli.validators import validate_args
from commit_timeline.config.settings import get_settings
from commit_timeline.logging_config import configure_logging, get_logger

__all__ = ["main", "CommandDispatcher"]

logger = get_logger(__name__)


class CommandDispatcher:
    """Dispatches CLI commands to appropriate handlers.

    Attributes:
        _layout_cmd: Command handler for laying out a repository.
        _check_cmd: Command handler for repository existence checks.

    """

    def __init__(self) -> None:
        """Initialize the command dispatcher with all command handlers."""
        self._layout_cmd = LayoutCommand()
        self._check_cmd = CheckRepoCommand()

    def dispatch(self, args: argparse.Namespace) -> int:
        """Dispatch to the appropriate command based on arguments.

        Args:
            args: Parsed command-line arguments.

        Returns:
            Exit code (0 for success, non-zero for errors).

        """
        if getattr(args, "check", False):
            result = self._check_cmd.execute(args)
            print(result.message)
            return result.exit_code

        result = self._layout_cmd.execute(args)
        if result.message:
            print(result.message, file=sys.stderr)
        if result.layout is not None:
            print(
                format_layout(
                    result.layout,
                    json_output=getattr(args, "json_output", False),
                    excerpt_length=get_settings().layout.excerpt_length,
                )
            )
        return result.exit_code


def main(argv: list[str] | None = None) -> int:
    """Run the CLI application.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).

    """
    parser = create_parser()
    args = parser.parse_args(argv)

    _setup_logging(getattr(args, "verbose", False))

    error = validate_args(args)
    if error:
        print(error, file=sys.stderr)
        return 1

    try:
        dispatcher = CommandDispatcher()
        return dispatcher.dispatch(args)

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 130

    except Exception as e:
        logger.exception("fatal_error", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        if getattr(args, "verbose", False):
            traceback.print_exc()
        return 1


def _setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI.

    Args:
        verbose: Whether to enable debug-level logging.

    """
    configure_logging(verbose=verbose, json_output=False)


if __name__ == "__main__":
    sys.exit(main())
