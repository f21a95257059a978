"""Default configuration values for commit-timeline.

This module centralizes all hard-coded default values used throughout
the package, making them easy to discover and modify.
"""

from datetime import timedelta

# Layout defaults
DEFAULT_TIME_SCALE = "day"
DEFAULT_GROUP_BY = "type"
DEFAULT_BUCKET_RESOLUTION = 100
DEFAULT_EXCERPT_LENGTH = 100

# Margin added on both sides of the event span, per time scale
RANGE_PADDING = {
    "hour": timedelta(hours=3),
    "day": timedelta(days=1),
    "week": timedelta(days=3),
    "month": timedelta(days=7),
    "year": timedelta(days=30),
}

# Store defaults
DEFAULT_EVENTS_PATH = "commits.json"

# Validation ranges
BUCKET_RESOLUTION_MIN = 1
BUCKET_RESOLUTION_MAX = 1000
EXCERPT_LENGTH_MIN = 10
EXCERPT_LENGTH_MAX = 1000
