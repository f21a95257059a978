"""Interval generator and axis label formatting.

Divides a TimeRange into consecutive one-unit intervals. Calendar units are
counted from the range start rather than chained, so a range starting on
the 31st keeps returning to the 31st (or the month's last day) instead of
drifting to the 28th.
"""

from __future__ import annotations

from commit_timeline.config.validators import resolve_time_scale
from commit_timeline.engine.units import shift_units
from commit_timeline.logging_config import get_logger
from commit_timeline.models.enums import TimeScale
from commit_timeline.models.layout import TimeInterval, TimeRange

__all__ = ["format_time_interval", "generate_intervals"]

logger = get_logger(__name__)

_LABEL_FORMATS = {
    TimeScale.hour: "%H:00",
    TimeScale.day: "%b %d",
    TimeScale.week: "%b %d",
    TimeScale.month: "%b %Y",
    TimeScale.year: "%Y",
}


def generate_intervals(
    time_range: TimeRange,
    scale: TimeScale | str,
) -> list[TimeInterval]:
    """Split a time range into contiguous intervals of one scale unit.

    The first interval starts at time_range.start; the last one is clipped
    to end exactly at time_range.end and may be shorter than a full unit.

    Args:
        time_range: Range to divide.
        scale: Width of each interval.

    Returns:
        Ordered, non-overlapping intervals covering the range; never empty.

    Raises:
        UnsupportedConfigurationError: If scale is not a known time scale.

    """
    scale = resolve_time_scale(scale)

    intervals: list[TimeInterval] = []
    current = time_range.start
    step = 1
    while current < time_range.end:
        boundary = min(shift_units(time_range.start, scale, step), time_range.end)
        intervals.append(TimeInterval(start=current, end=boundary))
        current = boundary
        step += 1

    logger.debug(
        "intervals_generated",
        scale=scale.value,
        interval_count=len(intervals),
    )
    return intervals


def format_time_interval(interval: TimeInterval, scale: TimeScale | str) -> str:
    """Format the axis label of an interval.

    Args:
        interval: Interval to label.
        scale: Time scale the interval was generated for.

    Returns:
        Label such as "14:00" (hour), "Mar 05" (day or week start),
        "Mar 2024" (month) or "2024" (year).

    Raises:
        UnsupportedConfigurationError: If scale is not a known time scale.

    """
    scale = resolve_time_scale(scale)
    return interval.start.strftime(_LABEL_FORMATS[scale])
