"""Event store for commit-timeline.

Reads commit records, normalizes them into Events at the ingestion
boundary, and resolves repository names from URLs.
"""

from commit_timeline.store.exceptions import EventStoreError, MalformedEventError
from commit_timeline.store.ingestion import normalize_record, normalize_records
from commit_timeline.store.json_store import JsonEventStore
from commit_timeline.store.repository import (
    extract_repo_name_from_url,
    is_github_repository_url,
    resolve_repo_name,
)

__all__ = [
    "EventStoreError",
    "extract_repo_name_from_url",
    "is_github_repository_url",
    "JsonEventStore",
    "MalformedEventError",
    "normalize_record",
    "normalize_records",
    "resolve_repo_name",
]
