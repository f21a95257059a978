"""Validation utilities for CLI arguments.

This module provides validation functions for CLI arguments.
"""

import argparse

from commit_timeline.config.defaults import (
    BUCKET_RESOLUTION_MAX,
    BUCKET_RESOLUTION_MIN,
)
from commit_timeline.store.repository import (
    is_github_repository_url,
    resolve_repo_name,
)

__all__ = ["validate_args"]


def validate_args(args: argparse.Namespace) -> str | None:
    """Validate CLI arguments for consistency.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Error message if validation fails, None if valid.

    """
    repo = getattr(args, "repo", None)
    if not repo or not repo.strip():
        return "Error: --repo is required"

    if "github.com" in repo and not is_github_repository_url(repo):
        return f"Error: '{repo}' is not a valid GitHub repository URL"

    if not resolve_repo_name(repo):
        return f"Error: Could not extract repository name from '{repo}'"

    resolution = getattr(args, "resolution", None)
    if resolution is not None and not (
        BUCKET_RESOLUTION_MIN <= resolution <= BUCKET_RESOLUTION_MAX
    ):
        return (
            f"Error: --resolution must be between {BUCKET_RESOLUTION_MIN} "
            f"and {BUCKET_RESOLUTION_MAX}"
        )

    return None
