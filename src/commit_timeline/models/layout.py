"""Layout models produced by the timeline engine.

These are derived values: every layout pass builds them fresh from the
current events, time scale and grouping key. None of them is persisted.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import ConfigDict, Field, model_validator

from commit_timeline.models.base import BaseSchema
from commit_timeline.models.enums import EventCategory, GroupBy, TimeScale
from commit_timeline.models.event import Event

__all__ = [
    "ClusteredEvent",
    "TimeInterval",
    "TimeRange",
    "TimelineLayout",
    "TimelineRow",
]


class TimeRange(BaseSchema):
    """Visible span of the timeline.

    Attributes:
        start: First visible instant.
        end: Last visible instant, strictly after start.
    """

    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime

    @model_validator(mode="after")
    def validate_non_degenerate(self) -> TimeRange:
        """Ensure the range has a strictly positive duration."""
        if self.end <= self.start:
            raise ValueError(
                f"TimeRange end ({self.end.isoformat()}) must be after "
                f"start ({self.start.isoformat()})"
            )
        return self

    @property
    def duration(self) -> timedelta:
        """Get the length of the range."""
        return self.end - self.start


class TimeInterval(BaseSchema):
    """One sub-span of a TimeRange used for axis labelling.

    Attributes:
        start: Inclusive start of the interval.
        end: End of the interval; equals the next interval's start.
    """

    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime


class ClusteredEvent(BaseSchema):
    """One or more events sharing a rounded timeline position.

    Attributes:
        position: Rounded position on the 0-100 axis.
        events: Member events in their original relative order.
        category: Dominant category of the members, used for coloring.
    """

    model_config = ConfigDict(frozen=True)

    position: float
    events: tuple[Event, ...] = Field(..., min_length=1)
    category: EventCategory

    @property
    def size(self) -> int:
        """Get the number of member events."""
        return len(self.events)

    @property
    def is_cluster(self) -> bool:
        """Check whether more than one event shares this position."""
        return len(self.events) > 1


class TimelineRow(BaseSchema):
    """Clusters of one group, rendered as one timeline row.

    Attributes:
        name: Group name (category, author or calendar day).
        clusters: Clusters of the group in ascending position order.
    """

    name: str
    clusters: list[ClusteredEvent] = Field(default_factory=list)

    @property
    def event_count(self) -> int:
        """Get the number of events in the row."""
        return sum(cluster.size for cluster in self.clusters)


class TimelineLayout(BaseSchema):
    """Result of one complete layout pass.

    Attributes:
        scale: Time scale the layout was computed for.
        group_by: Grouping strategy used for the rows.
        time_range: Visible span.
        intervals: Axis intervals covering the span.
        rows: Non-empty rows in display order.
    """

    scale: TimeScale
    group_by: GroupBy
    time_range: TimeRange
    intervals: list[TimeInterval]
    rows: list[TimelineRow] = Field(default_factory=list)

    @property
    def event_count(self) -> int:
        """Get the number of events across all rows."""
        return sum(row.event_count for row in self.rows)
