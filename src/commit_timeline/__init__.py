"""Timeline layout and clustering engine for repository commits."""

__version__ = "0.1.0"

from commit_timeline.engine import (  # noqa: E402
    build_timeline,
    compute_time_range,
    generate_intervals,
    group_events,
    layout_clusters,
)

__all__ = [
    "__version__",
    "build_timeline",
    "compute_time_range",
    "generate_intervals",
    "group_events",
    "layout_clusters",
]
