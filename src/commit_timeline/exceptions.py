"""Base exceptions for commit-timeline.

This module defines the root exception hierarchy for the entire
commit-timeline package. All domain-specific exceptions should
inherit from CommitTimelineError.
"""

__all__ = ["CommitTimelineError"]


class CommitTimelineError(Exception):
    """Base exception for all commit-timeline errors.

    All exceptions in the commit-timeline package inherit from this base.
    Provides a common exception type for clients to catch package errors.
    """

    pass
