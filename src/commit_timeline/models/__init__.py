"""Models module for commit-timeline.

This module contains the data models of the layout engine:
- base: BaseSchema for Pydantic models
- enums: EventCategory, TimeScale, GroupBy
- event: Event, Analysis and the effective category rule
- layout: TimeRange, TimeInterval, ClusteredEvent, TimelineRow, TimelineLayout
"""

from commit_timeline.models.base import BaseSchema
from commit_timeline.models.enums import EventCategory, GroupBy, TimeScale
from commit_timeline.models.event import (
    DEFAULT_CATEGORY,
    Analysis,
    Event,
    effective_category,
)
from commit_timeline.models.layout import (
    ClusteredEvent,
    TimeInterval,
    TimelineLayout,
    TimelineRow,
    TimeRange,
)

__all__ = [
    # Base
    "BaseSchema",
    # Enums
    "EventCategory",
    "GroupBy",
    "TimeScale",
    # Events
    "DEFAULT_CATEGORY",
    "Analysis",
    "Event",
    "effective_category",
    # Layout
    "ClusteredEvent",
    "TimeInterval",
    "TimelineLayout",
    "TimelineRow",
    "TimeRange",
]
