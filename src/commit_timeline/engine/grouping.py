"""Grouping engine: partitions events into named timeline rows."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from commit_timeline.config.validators import resolve_group_by
from commit_timeline.logging_config import get_logger
from commit_timeline.models.enums import EventCategory, GroupBy
from commit_timeline.models.event import Event, effective_category

__all__ = ["group_events", "group_name"]

logger = get_logger(__name__)

_GROUP_NAME_FUNCS: dict[GroupBy, Callable[[Event], str]] = {
    GroupBy.type: lambda event: effective_category(event).value,
    GroupBy.author: lambda event: event.author,
    GroupBy.date: lambda event: event.timestamp.date().isoformat(),
}


def group_name(event: Event, group_by: GroupBy | str) -> str:
    """Get the name of the group an event belongs to.

    Args:
        event: Event to classify.
        group_by: Grouping strategy.

    Returns:
        The effective category value, the author verbatim, or the calendar
        day (YYYY-MM-DD) of the timestamp, depending on group_by.

    Raises:
        UnsupportedConfigurationError: If group_by is not a known key.

    """
    return _GROUP_NAME_FUNCS[resolve_group_by(group_by)](event)


def group_events(
    events: Sequence[Event],
    group_by: GroupBy | str,
) -> dict[str, list[Event]]:
    """Partition events into named groups.

    Every event lands in exactly one group and keeps its relative order.
    Groups without members are never returned. Category groups are ordered
    like the EventCategory enumeration; author and date groups are ordered
    by first appearance.

    Args:
        events: Events to partition.
        group_by: Grouping strategy.

    Returns:
        Mapping from group name to its events.

    Raises:
        UnsupportedConfigurationError: If group_by is not a known key.

    """
    group_by = resolve_group_by(group_by)
    name_of = _GROUP_NAME_FUNCS[group_by]

    groups: dict[str, list[Event]] = {}
    if group_by is GroupBy.type:
        # Pre-seed in enumeration order; empty ones are dropped below
        groups = {category.value: [] for category in EventCategory}

    for event in events:
        groups.setdefault(name_of(event), []).append(event)

    result = {name: members for name, members in groups.items() if members}
    logger.debug(
        "events_grouped",
        group_by=group_by.value,
        event_count=len(events),
        group_count=len(result),
    )
    return result
