"""CLI argument parser configuration.

This module provides the argument parser for the commit-timeline CLI.
"""

import argparse

from commit_timeline import __version__
from commit_timeline.models.enums import GroupBy, TimeScale

__all__ = ["create_parser"]


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser.

    Returns:
        An ArgumentParser configured with all CLI options.

    """
    parser = argparse.ArgumentParser(
        prog="commit-timeline",
        description=(
            "Commit Timeline - Lay out a repository's commits on a timeline, "
            "grouped into rows, with overlapping commits merged into clusters."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Lay out a repository by day, one row per commit type
  commit-timeline --events commits.json --repo octo/widgets

  # Use a GitHub URL and a monthly axis, one row per author
  commit-timeline --events commits.yaml --repo https://github.com/octo/widgets \\
      --scale month --group-by author

  # Emit the layout as JSON for a renderer
  commit-timeline --events commits.json --repo octo/widgets --json

  # Only check whether the repository has any commits
  commit-timeline --events commits.json --repo octo/widgets --check
""",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # Input
    parser.add_argument(
        "--events",
        "-e",
        type=str,
        metavar="FILE",
        help=(
            "JSON or YAML file of commit records "
            "(default: COMMIT_TIMELINE_STORE_EVENTS_PATH or commits.json)"
        ),
    )

    parser.add_argument(
        "--repo",
        "-r",
        type=str,
        metavar="REPO",
        help="Repository as owner/name or a GitHub URL",
    )

    # Layout
    parser.add_argument(
        "--scale",
        "-s",
        type=str,
        choices=[scale.value for scale in TimeScale],
        help="Time scale of the axis (default: day)",
    )

    parser.add_argument(
        "--group-by",
        "-g",
        type=str,
        dest="group_by",
        choices=[key.value for key in GroupBy],
        help="Row grouping strategy (default: type)",
    )

    parser.add_argument(
        "--resolution",
        type=int,
        metavar="N",
        help="Collision grid resolution across the axis (default: 100)",
    )

    parser.add_argument(
        "--check",
        action="store_true",
        help="Only report whether the repository has commits",
    )

    # Output format
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output with debug logging",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output results as JSON instead of formatted text",
    )

    return parser
