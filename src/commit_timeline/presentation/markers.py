"""Marker view models for timeline clusters.

A marker is everything the renderer needs to draw one cluster: where it
goes, how it looks and what its tooltip says. Single events show their own
analysis; merged events show a cluster summary colored by the dominant
category.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from commit_timeline.config.defaults import DEFAULT_EXCERPT_LENGTH
from commit_timeline.models.base import BaseSchema
from commit_timeline.models.enums import EventCategory
from commit_timeline.models.event import Event, effective_category
from commit_timeline.models.layout import ClusteredEvent
from commit_timeline.presentation.styles import CLUSTER_ICON, category_style

__all__ = ["Marker", "build_marker", "format_date", "truncate"]

CLUSTER_TITLE = "Commit Cluster"


class Marker(BaseSchema):
    """Presentation data for one cluster.

    Attributes:
        key: Stable key (event id, or "cluster-<position>" for merged events).
        position: Position on the 0-100 axis.
        category: Category used for coloring.
        color: Marker color.
        icon: Marker icon.
        count: Number of events behind the marker.
        title: Tooltip heading.
        subtitle: Tooltip secondary line.
        excerpt: Tooltip body.
        event_ids: Identifiers of the events behind the marker.
        members: One single-event marker per member of a merged marker;
            empty for single events.
    """

    key: str
    position: float
    category: EventCategory
    color: str
    icon: str
    count: int = Field(..., ge=1)
    title: str
    subtitle: str
    excerpt: str = ""
    event_ids: list[str] = Field(default_factory=list)
    members: list[Marker] = Field(default_factory=list)


def format_date(timestamp: datetime) -> str:
    """Format a timestamp for tooltips, e.g. "Mar 05, 2024 14:30"."""
    return timestamp.strftime("%b %d, %Y %H:%M")


def truncate(text: str, length: int = DEFAULT_EXCERPT_LENGTH) -> str:
    """Cut text to length characters, marking the cut with "..."."""
    if len(text) <= length:
        return text
    return text[:length] + "..."


def _event_marker(
    event: Event,
    position: float,
    excerpt_length: int,
) -> Marker:
    category = effective_category(event)
    style = category_style(category)
    analysis = event.primary_analysis
    title = (analysis.title if analysis else "") or event.message
    body = (analysis.idea if analysis else "") or event.description or ""
    return Marker(
        key=event.id,
        position=position,
        category=category,
        color=style.color,
        icon=style.icon,
        count=1,
        title=title,
        subtitle=f"{event.author} • {format_date(event.timestamp)}",
        excerpt=truncate(body, excerpt_length),
        event_ids=[event.id],
    )


def build_marker(
    cluster: ClusteredEvent,
    excerpt_length: int = DEFAULT_EXCERPT_LENGTH,
) -> Marker:
    """Build the marker of a cluster.

    Merged markers list one member marker per event, in cluster order, so a
    renderer can show each commit of the cluster.

    Args:
        cluster: Cluster to present.
        excerpt_length: Maximum tooltip body length for single events.

    Returns:
        The marker.

    """
    if not cluster.is_cluster:
        return _event_marker(cluster.events[0], cluster.position, excerpt_length)

    style = category_style(cluster.category)
    return Marker(
        key=f"cluster-{cluster.position:g}",
        position=cluster.position,
        category=cluster.category,
        color=style.color,
        icon=CLUSTER_ICON,
        count=cluster.size,
        title=CLUSTER_TITLE,
        subtitle=f"Contains {cluster.size} commits",
        excerpt=f"Click to view all {cluster.size} commits in this time period",
        event_ids=[event.id for event in cluster.events],
        members=[
            _event_marker(event, cluster.position, excerpt_length)
            for event in cluster.events
        ],
    )
