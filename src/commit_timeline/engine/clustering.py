"""Position and cluster engine.

Maps event timestamps onto a 0-100 axis and merges events that land in the
same grid bucket. The grid is deliberately coarse: with the default
resolution of 100 there are 101 buckets, and two events less than one unit
apart may or may not share a bucket depending on which way they round.
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence
from datetime import datetime

from commit_timeline.config.defaults import DEFAULT_BUCKET_RESOLUTION
from commit_timeline.config.validators import resolve_time_scale
from commit_timeline.logging_config import get_logger
from commit_timeline.models.enums import EventCategory, TimeScale
from commit_timeline.models.event import Event, effective_category
from commit_timeline.models.layout import ClusteredEvent, TimeRange

__all__ = [
    "bucket_position",
    "calculate_position",
    "dominant_category",
    "layout_clusters",
]

logger = get_logger(__name__)


def calculate_position(timestamp: datetime, time_range: TimeRange) -> float:
    """Map a timestamp to its fractional offset into a range, scaled to 0-100.

    Args:
        timestamp: Instant to place.
        time_range: Visible range; its start maps to 0 and its end to 100.

    Returns:
        The normalized position. Timestamps outside the range fall outside
        0-100.

    """
    return 100 * ((timestamp - time_range.start) / time_range.duration)


def bucket_position(
    position: float,
    resolution: int = DEFAULT_BUCKET_RESOLUTION,
) -> float:
    """Round a position to the nearest point of the collision grid.

    Halves round up, so 42.5 goes to 43 on the default grid.

    Args:
        position: Normalized position on the 0-100 axis.
        resolution: Number of grid steps across the axis.

    Returns:
        The grid point the position belongs to.

    """
    step = 100 / resolution
    return math.floor(position / step + 0.5) * step


def dominant_category(events: Sequence[Event]) -> EventCategory:
    """Pick the most frequent effective category among events.

    A single event simply yields its own effective category. On a tie the
    category met first while walking the events wins.

    Args:
        events: Non-empty sequence of events.

    Returns:
        The dominant category.

    Raises:
        ValueError: If events is empty.

    """
    if not events:
        raise ValueError("Cannot pick a dominant category of no events")
    # most_common keeps first-encountered order among equal counts
    tally = Counter(effective_category(event) for event in events)
    return tally.most_common(1)[0][0]


def layout_clusters(
    group_events: Sequence[Event],
    time_range: TimeRange,
    scale: TimeScale | str,
    *,
    resolution: int = DEFAULT_BUCKET_RESOLUTION,
) -> list[ClusteredEvent]:
    """Place one group's events on the axis and merge colliding ones.

    Args:
        group_events: Events of a single group, in display order.
        time_range: Range the positions are relative to.
        scale: Time scale of the layout.
        resolution: Number of grid steps across the axis.

    Returns:
        Clusters in ascending position order. Members keep their input
        order and every input event belongs to exactly one cluster.

    Raises:
        UnsupportedConfigurationError: If scale is not a known time scale.

    """
    scale = resolve_time_scale(scale)

    buckets: dict[float, list[Event]] = {}
    for event in group_events:
        position = bucket_position(
            calculate_position(event.timestamp, time_range), resolution
        )
        buckets.setdefault(position, []).append(event)

    clusters = [
        ClusteredEvent(
            position=position,
            events=tuple(members),
            category=dominant_category(members),
        )
        for position, members in sorted(buckets.items())
    ]
    logger.debug(
        "clusters_laid_out",
        scale=scale.value,
        event_count=len(group_events),
        cluster_count=len(clusters),
        merged_count=sum(1 for cluster in clusters if cluster.is_cluster),
    )
    return clusters
