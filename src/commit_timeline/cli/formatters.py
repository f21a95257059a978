"""Output formatting utilities for CLI.

This module provides functions for formatting timeline layouts as text
or JSON.
"""

import json
from typing import Any

from commit_timeline.config.defaults import DEFAULT_EXCERPT_LENGTH
from commit_timeline.engine.intervals import format_time_interval
from commit_timeline.models.enums import GroupBy
from commit_timeline.models.layout import TimelineLayout
from commit_timeline.presentation.markers import build_marker, format_date
from commit_timeline.presentation.styles import category_style

__all__ = [
    "format_layout",
    "layout_to_dict",
]


def layout_to_dict(
    layout: TimelineLayout,
    excerpt_length: int = DEFAULT_EXCERPT_LENGTH,
) -> dict[str, Any]:
    """Convert a layout into a JSON-ready dictionary for a renderer.

    Args:
        layout: Layout to convert.
        excerpt_length: Maximum marker excerpt length.

    Returns:
        Dictionary with the range, labelled intervals and marker rows.

    """
    rows = []
    for row in layout.rows:
        row_data: dict[str, Any] = {
            "name": row.name,
            "event_count": row.event_count,
            "markers": [
                build_marker(cluster, excerpt_length).model_dump(mode="json")
                for cluster in row.clusters
            ],
        }
        if layout.group_by is GroupBy.type:
            row_data["style"] = category_style(row.name).model_dump(mode="json")
        rows.append(row_data)

    return {
        "scale": layout.scale.value,
        "group_by": layout.group_by.value,
        "time_range": layout.time_range.model_dump(mode="json"),
        "intervals": [
            {
                **interval.model_dump(mode="json"),
                "label": format_time_interval(interval, layout.scale),
            }
            for interval in layout.intervals
        ],
        "rows": rows,
    }


def format_layout(
    layout: TimelineLayout,
    json_output: bool = False,
    excerpt_length: int = DEFAULT_EXCERPT_LENGTH,
) -> str:
    """Format a layout for output.

    Args:
        layout: Layout to format.
        json_output: Whether to format as JSON.
        excerpt_length: Maximum marker excerpt length.

    Returns:
        Formatted string output.

    """
    if json_output:
        return json.dumps(layout_to_dict(layout, excerpt_length), indent=2)

    labels = [
        format_time_interval(interval, layout.scale) for interval in layout.intervals
    ]

    lines = []
    lines.append("")
    lines.append("=" * 60)
    lines.append("Commit Timeline")
    lines.append("=" * 60)
    lines.append(f"  Scale: {layout.scale.value}")
    lines.append(f"  Grouped by: {layout.group_by.value}")
    lines.append(
        f"  Range: {format_date(layout.time_range.start)} - "
        f"{format_date(layout.time_range.end)}"
    )
    lines.append(f"  Intervals: {len(labels)} ({labels[0]} .. {labels[-1]})")

    for row in layout.rows:
        lines.append("")
        lines.append("-" * 60)
        lines.append(f"{row.name} ({row.event_count} commits)")
        lines.append("-" * 60)
        for cluster in row.clusters:
            marker = build_marker(cluster, excerpt_length)
            if marker.count > 1:
                lines.append(
                    f"  [{marker.position:5.1f}] {marker.category.value} x{marker.count} "
                    f"{marker.title}: {', '.join(marker.event_ids)}"
                )
                for member in marker.members:
                    lines.append(
                        f"      - {member.key} {member.category.value} "
                        f"{member.title} ({member.subtitle})"
                    )
            else:
                lines.append(
                    f"  [{marker.position:5.1f}] {marker.category.value} "
                    f"{marker.title} ({marker.subtitle})"
                )

    lines.append("")
    lines.append("-" * 60)
    lines.append("Summary")
    lines.append("-" * 60)
    lines.append(f"  Total commits: {layout.event_count}")
    lines.append(f"  Rows: {len(layout.rows)}")
    lines.append(f"  Markers: {sum(len(row.clusters) for row in layout.rows)}")
    lines.append("")

    return "\n".join(lines)
