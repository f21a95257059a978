"""File-backed event store.

Reads commit records from a JSON or YAML document and serves the events of
one repository at a time. The document is either a list of records or a
mapping with a "commits" list; every record names its repository in
"repo_name".
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from commit_timeline.logging_config import get_logger
from commit_timeline.models.event import Event
from commit_timeline.store.exceptions import EventStoreError
from commit_timeline.store.ingestion import normalize_records

__all__ = ["JsonEventStore"]

logger = get_logger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


class JsonEventStore:
    """Read-only store of commit records kept in a single file.

    Attributes:
        path: File holding the commit records.

    """

    def __init__(self, path: Path) -> None:
        """Initialize the store.

        Args:
            path: File holding the commit records (JSON, or YAML by suffix).

        """
        self.path = path

    def fetch_events(self, repo_name: str) -> list[Event]:
        """Get the events of one repository in stored order.

        Args:
            repo_name: Repository name ("owner/name").

        Returns:
            The repository's events; empty if it has no records.

        Raises:
            EventStoreError: If the file cannot be read or parsed.
            MalformedEventError: If a record of the repository is malformed.

        """
        logger.debug("fetching_events", repo_name=repo_name, path=str(self.path))
        records = [
            record
            for record in self._load_records()
            if record.get("repo_name") == repo_name
        ]
        events = normalize_records(records)
        logger.info("events_fetched", repo_name=repo_name, count=len(events))
        return events

    def repo_exists(self, repo_name: str) -> bool:
        """Check whether the store holds any record of a repository.

        Args:
            repo_name: Repository name ("owner/name").

        Returns:
            True if at least one record belongs to the repository.

        Raises:
            EventStoreError: If the file cannot be read or parsed.

        """
        exists = any(
            record.get("repo_name") == repo_name for record in self._load_records()
        )
        logger.debug("repo_checked", repo_name=repo_name, exists=exists)
        return exists

    def _load_records(self) -> list[dict[str, Any]]:
        """Load and validate the raw records from the store file.

        Returns:
            List of record mappings.

        Raises:
            EventStoreError: If the file is missing, unreadable, unparsable,
                or not a list of mappings.

        """
        if not self.path.exists():
            raise EventStoreError(f"Commit records file not found: {self.path}")

        try:
            with self.path.open("r", encoding="utf-8") as f:
                if self.path.suffix.lower() in _YAML_SUFFIXES:
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise EventStoreError(
                f"Failed to parse commit records from {self.path}: {e}"
            ) from e
        except OSError as e:
            raise EventStoreError(
                f"Failed to read commit records from {self.path}: {e}"
            ) from e

        if data is None:
            return []

        if isinstance(data, dict):
            data = data.get("commits", [])

        if not isinstance(data, list):
            raise EventStoreError(
                f"Invalid commit records structure: expected list, "
                f"got {type(data).__name__}"
            )

        for index, record in enumerate(data):
            if not isinstance(record, dict):
                raise EventStoreError(
                    f"Invalid commit record at index {index}: expected mapping, "
                    f"got {type(record).__name__}"
                )
        return data
