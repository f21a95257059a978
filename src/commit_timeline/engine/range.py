"""Range calculator for the timeline.

Derives the visible time span from a set of events. The span always has a
strictly positive duration so that it can be divided into intervals and
used as the denominator of position mapping.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone

from commit_timeline.config.defaults import RANGE_PADDING
from commit_timeline.config.validators import resolve_time_scale
from commit_timeline.engine.units import shift_units
from commit_timeline.logging_config import get_logger
from commit_timeline.models.enums import TimeScale
from commit_timeline.models.event import Event
from commit_timeline.models.layout import TimeRange

__all__ = ["compute_time_range"]

logger = get_logger(__name__)


def compute_time_range(
    events: Sequence[Event],
    scale: TimeScale | str,
    *,
    now: datetime | None = None,
) -> TimeRange:
    """Compute the time range covering all event timestamps.

    With no events, the range is centred on the current instant and extends
    one scale unit in each direction. Otherwise it runs from the earliest to
    the latest timestamp, widened on both sides by the scale's padding so
    that boundary events are not drawn flush against the edges.

    Args:
        events: Events to cover.
        scale: Time scale controlling the padding.
        now: Anchor for an empty event set (defaults to the current UTC time).

    Returns:
        A TimeRange with start strictly before end.

    Raises:
        UnsupportedConfigurationError: If scale is not a known time scale.

    """
    scale = resolve_time_scale(scale)

    if not events:
        anchor = now if now is not None else datetime.now(timezone.utc)
        time_range = TimeRange(
            start=shift_units(anchor, scale, -1),
            end=shift_units(anchor, scale, 1),
        )
        logger.debug(
            "time_range_computed",
            scale=scale.value,
            event_count=0,
            start=time_range.start.isoformat(),
            end=time_range.end.isoformat(),
        )
        return time_range

    timestamps = [event.timestamp for event in events]
    padding = RANGE_PADDING[scale.value]
    time_range = TimeRange(
        start=min(timestamps) - padding,
        end=max(timestamps) + padding,
    )
    logger.debug(
        "time_range_computed",
        scale=scale.value,
        event_count=len(events),
        start=time_range.start.isoformat(),
        end=time_range.end.isoformat(),
    )
    return time_range
