"""Calendar arithmetic for time scale units.

Hours, days and weeks are fixed-length steps. Months and years follow the
calendar: the day of month is clamped when the target month is shorter
(January 31 plus one month is the last day of February).
"""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta

from commit_timeline.models.enums import TimeScale

__all__ = ["shift_months", "shift_units"]

_FIXED_UNITS = {
    TimeScale.hour: timedelta(hours=1),
    TimeScale.day: timedelta(days=1),
    TimeScale.week: timedelta(weeks=1),
}

_MONTHS_PER_UNIT = {
    TimeScale.month: 1,
    TimeScale.year: 12,
}


def shift_months(moment: datetime, months: int) -> datetime:
    """Move a datetime by a whole number of calendar months.

    Args:
        moment: Starting instant. Time of day and tzinfo are preserved.
        months: Number of months to move, negative to move backwards.

    Returns:
        The shifted datetime, with the day clamped to the target month.

    """
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def shift_units(moment: datetime, scale: TimeScale, count: int = 1) -> datetime:
    """Move a datetime by a number of time scale units.

    Args:
        moment: Starting instant.
        scale: Unit to move by.
        count: Number of units, negative to move backwards.

    Returns:
        The shifted datetime.

    """
    if scale in _FIXED_UNITS:
        return moment + _FIXED_UNITS[scale] * count
    return shift_months(moment, _MONTHS_PER_UNIT[scale] * count)
