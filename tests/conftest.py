"""Pytest configuration and shared fixtures for the commit-timeline test suite.

This module provides common fixtures used across unit and integration tests,
including an event factory and sample commit records on disk.
"""

import json
import shutil
from collections.abc import Callable, Iterator
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

import pytest

from commit_timeline.config.settings import get_settings
from commit_timeline.models.event import Analysis, Event

FIXTURES_DIR = Path(__file__).parent / "fixtures"

EventFactory = Callable[..., Event]


@pytest.fixture
def base_time() -> datetime:
    """Provide a fixed reference instant (2024-03-01 00:00 UTC)."""
    return datetime(2024, 3, 1, tzinfo=timezone.utc)


@pytest.fixture
def make_event(base_time: datetime) -> EventFactory:
    """Provide a factory for events placed relative to base_time.

    The factory takes an id, an offset in hours and any number of
    categories (one analysis per category). Keyword arguments override the
    author, timestamp, message and description.

    Returns:
        Callable building an Event.
    """

    def _make(
        event_id: str,
        hours: float = 0,
        *categories: str,
        author: str = "alice",
        timestamp: datetime | None = None,
        message: str | None = None,
        description: str | None = None,
    ) -> Event:
        return Event(
            id=event_id,
            timestamp=timestamp or base_time + timedelta(hours=hours),
            author=author,
            message=message if message is not None else f"commit {event_id}",
            description=description,
            analyses=[
                Analysis(category=category, title=f"{category} {event_id}")
                for category in categories
            ],
        )

    return _make


@pytest.fixture
def sample_records() -> list[dict[str, Any]]:
    """Provide the raw commit records of the sample fixture file."""
    with (FIXTURES_DIR / "commits.json").open(encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def commits_file(tmp_path: Path) -> Path:
    """Provide a copy of the sample commit records in a temp directory."""
    target = tmp_path / "commits.json"
    shutil.copy(FIXTURES_DIR / "commits.json", target)
    return target


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Reset the cached settings so environment overrides apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
