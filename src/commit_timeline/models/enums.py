"""Enumeration types for commit-timeline.

This module defines the closed enumerations used by the layout engine:
event categories, time scales, and grouping strategies.
"""

from enum import Enum

__all__ = [
    "EventCategory",
    "GroupBy",
    "TimeScale",
]


class EventCategory(str, Enum):
    """Category assigned to an event by its analysis.

    Member order is significant: it is the row order used when grouping
    by category.

    Attributes:
        FEATURE: New functionality.
        WARNING: Change that deserves attention.
        MILESTONE: Notable point in the project history.
        BUG: Defect fix.
        CHORE: Maintenance; also the default for unanalysed events.
    """

    FEATURE = "FEATURE"
    WARNING = "WARNING"
    MILESTONE = "MILESTONE"
    BUG = "BUG"
    CHORE = "CHORE"


class TimeScale(str, Enum):
    """Granularity of the timeline axis, from finest to coarsest.

    Attributes:
        hour: One interval per hour.
        day: One interval per day.
        week: One interval per seven days.
        month: One interval per calendar month.
        year: One interval per calendar year.
    """

    hour = "hour"
    day = "day"
    week = "week"
    month = "month"
    year = "year"


class GroupBy(str, Enum):
    """Strategy used to partition events into timeline rows.

    Attributes:
        type: One row per effective category.
        author: One row per author.
        date: One row per calendar day.
    """

    type = "type"
    author = "author"
    date = "date"
