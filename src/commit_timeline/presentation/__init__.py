"""Presentation helpers: marker view models and category styles.

Nothing here draws; these are the values a renderer needs.
"""

from commit_timeline.presentation.markers import (
    Marker,
    build_marker,
    format_date,
    truncate,
)
from commit_timeline.presentation.styles import CategoryStyle, category_style

__all__ = [
    "build_marker",
    "category_style",
    "CategoryStyle",
    "format_date",
    "Marker",
    "truncate",
]
