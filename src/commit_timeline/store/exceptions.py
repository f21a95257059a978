"""Exceptions for the store module.

This module defines exceptions raised while reading commit records and
converting them into events.
"""

from commit_timeline.exceptions import CommitTimelineError

__all__ = ["EventStoreError", "MalformedEventError"]


class EventStoreError(CommitTimelineError):
    """Raised when commit records cannot be read or parsed."""

    pass


class MalformedEventError(EventStoreError):
    """Raised when a commit record cannot become an Event.

    Attributes:
        event_id: Identifier of the offending record, if it has one.
        reason: What is wrong with the record.

    """

    def __init__(self, event_id: str | None, reason: str) -> None:
        """Initialize the error.

        Args:
            event_id: Identifier of the offending record, if it has one.
            reason: What is wrong with the record.

        """
        self.event_id = event_id
        self.reason = reason
        label = event_id if event_id else "<unknown>"
        super().__init__(f"Malformed commit record {label}: {reason}")
