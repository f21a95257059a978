"""Full layout pass over an event set.

Composes the range calculator, interval generator, grouping engine and
cluster engine into one TimelineLayout for the presentation layer.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from commit_timeline.config.defaults import DEFAULT_BUCKET_RESOLUTION
from commit_timeline.config.validators import resolve_group_by, resolve_time_scale
from commit_timeline.engine.clustering import layout_clusters
from commit_timeline.engine.grouping import group_events
from commit_timeline.engine.intervals import generate_intervals
from commit_timeline.engine.range import compute_time_range
from commit_timeline.logging_config import get_logger
from commit_timeline.models.enums import GroupBy, TimeScale
from commit_timeline.models.event import Event
from commit_timeline.models.layout import TimelineLayout, TimelineRow

__all__ = ["build_timeline"]

logger = get_logger(__name__)


def build_timeline(
    events: Sequence[Event],
    scale: TimeScale | str,
    group_by: GroupBy | str,
    *,
    resolution: int = DEFAULT_BUCKET_RESOLUTION,
    now: datetime | None = None,
) -> TimelineLayout:
    """Run a complete layout pass.

    Args:
        events: Events to lay out, in stored order.
        scale: Time scale of the axis.
        group_by: Grouping strategy for the rows.
        resolution: Collision grid resolution.
        now: Anchor used when events is empty.

    Returns:
        The layout: range, axis intervals and one row per non-empty group.

    Raises:
        UnsupportedConfigurationError: If scale or group_by is unknown.

    """
    scale = resolve_time_scale(scale)
    group_by = resolve_group_by(group_by)

    time_range = compute_time_range(events, scale, now=now)
    intervals = generate_intervals(time_range, scale)
    rows = [
        TimelineRow(
            name=name,
            clusters=layout_clusters(
                members, time_range, scale, resolution=resolution
            ),
        )
        for name, members in group_events(events, group_by).items()
    ]

    layout = TimelineLayout(
        scale=scale,
        group_by=group_by,
        time_range=time_range,
        intervals=intervals,
        rows=rows,
    )
    logger.debug(
        "timeline_layout_computed",
        scale=scale.value,
        group_by=group_by.value,
        event_count=len(events),
        row_count=len(rows),
        interval_count=len(intervals),
    )
    return layout
