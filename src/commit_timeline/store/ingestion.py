"""Ingestion boundary between raw commit records and Event models.

Raw records come in more than one shape: the analyses may live under
"analyses", "commit_analyses" or the legacy misspelling "commit_analises",
and analyses name their category "type". This module folds all of them into
the single canonical Event shape so that the layout engine never has to
branch on record shape.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from commit_timeline.models.event import DEFAULT_CATEGORY, Event
from commit_timeline.store.exceptions import MalformedEventError

__all__ = ["ANALYSES_KEYS", "normalize_record", "normalize_records"]

# Checked in order; the first key holding a list wins, even an empty one
ANALYSES_KEYS = ("analyses", "commit_analyses", "commit_analises")


def _pick(raw: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return None


def _normalize_analysis(raw: Mapping[str, Any]) -> dict[str, Any]:
    category = _pick(raw, "category", "type") or DEFAULT_CATEGORY.value
    if isinstance(category, str):
        category = category.strip().upper()
    return {
        "category": category,
        "title": raw.get("title") or "",
        "idea": raw.get("idea") or "",
    }


def normalize_record(raw: Mapping[str, Any]) -> Event:
    """Convert one raw commit record into an Event.

    Args:
        raw: Record as read from the store. Extra fields are ignored.

    Returns:
        The canonical Event.

    Raises:
        MalformedEventError: If the record has no identifier, no timestamp,
            a timestamp without a timezone, a non-mapping analysis entry,
            or a value that fails validation.

    """
    event_id = _pick(raw, "sha", "id")
    if event_id is not None:
        event_id = str(event_id)
    if not event_id:
        raise MalformedEventError(None, "missing identifier")

    timestamp = _pick(raw, "date", "timestamp")
    if timestamp is None or timestamp == "":
        raise MalformedEventError(event_id, "missing timestamp")

    analyses = _pick(raw, *ANALYSES_KEYS) or []
    if not isinstance(analyses, list):
        raise MalformedEventError(
            event_id, f"analyses must be a list, got {type(analyses).__name__}"
        )
    for item in analyses:
        if not isinstance(item, Mapping):
            raise MalformedEventError(
                event_id,
                f"analysis entries must be mappings, got {type(item).__name__}",
            )

    try:
        event = Event.model_validate(
            {
                "id": event_id,
                "timestamp": timestamp,
                "author": raw.get("author") or "",
                "message": raw.get("message") or "",
                "description": raw.get("description"),
                "analyses": [_normalize_analysis(item) for item in analyses],
            }
        )
    except ValidationError as e:
        raise MalformedEventError(event_id, str(e)) from e

    # Every Event carries a timezone-aware timestamp
    if event.timestamp.tzinfo is None:
        raise MalformedEventError(event_id, "timestamp has no timezone")
    return event


def normalize_records(raws: Iterable[Mapping[str, Any]]) -> list[Event]:
    """Convert raw commit records into Events, preserving order.

    Args:
        raws: Records as read from the store.

    Returns:
        Events in the same order as the records.

    Raises:
        MalformedEventError: On the first record that cannot be converted.

    """
    return [normalize_record(raw) for raw in raws]
