"""Timeline layout and clustering engine.

The four layout operations are pure functions:
- compute_time_range: events and scale to the visible TimeRange
- generate_intervals: TimeRange and scale to axis intervals
- group_events: events and grouping key to named rows
- layout_clusters: one row's events to positioned clusters

build_timeline runs all four in a single pass.
"""

from commit_timeline.engine.clustering import (
    bucket_position,
    calculate_position,
    dominant_category,
    layout_clusters,
)
from commit_timeline.engine.grouping import group_events, group_name
from commit_timeline.engine.intervals import format_time_interval, generate_intervals
from commit_timeline.engine.range import compute_time_range
from commit_timeline.engine.timeline import build_timeline
from commit_timeline.engine.units import shift_months, shift_units

__all__ = [
    "bucket_position",
    "build_timeline",
    "calculate_position",
    "compute_time_range",
    "dominant_category",
    "format_time_interval",
    "generate_intervals",
    "group_events",
    "group_name",
    "layout_clusters",
    "shift_months",
    "shift_units",
]
