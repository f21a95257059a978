"""Unit tests for the grouping engine.

Tests category, author and date grouping, group ordering, omission of
empty groups and the strict-partition property.
"""

from datetime import datetime, timezone

import pytest

from commit_timeline.config.exceptions import UnsupportedConfigurationError
from commit_timeline.engine.grouping import group_events, group_name
from commit_timeline.models.enums import GroupBy
from commit_timeline.store.ingestion import normalize_records


class TestGroupByType:
    """Tests for grouping by effective category."""

    def test_groups_by_first_analysis(self, make_event) -> None:
        """Test that only the first analysis decides the group."""
        events = [
            make_event("a", 0, "BUG", "FEATURE"),
            make_event("b", 1, "FEATURE"),
            make_event("c", 2, "BUG"),
        ]
        groups = group_events(events, GroupBy.type)
        assert [e.id for e in groups["BUG"]] == ["a", "c"]
        assert [e.id for e in groups["FEATURE"]] == ["b"]

    def test_unanalysed_event_is_chore(self, make_event) -> None:
        """Test that an event without analyses lands in CHORE."""
        groups = group_events([make_event("bare", 0)], "type")
        assert list(groups) == ["CHORE"]

    def test_rows_follow_category_order(self, make_event) -> None:
        """Test that category rows follow the enumeration order."""
        events = [
            make_event("a", 0),
            make_event("b", 1, "BUG"),
            make_event("c", 2, "MILESTONE"),
            make_event("d", 3, "FEATURE"),
        ]
        assert list(group_events(events, GroupBy.type)) == [
            "FEATURE",
            "MILESTONE",
            "BUG",
            "CHORE",
        ]

    def test_empty_groups_omitted(self, make_event) -> None:
        """Test that categories without events are not returned."""
        groups = group_events([make_event("a", 0, "WARNING")], GroupBy.type)
        assert list(groups) == ["WARNING"]

    def test_empty_input(self) -> None:
        """Test that no events give no groups."""
        assert group_events([], GroupBy.type) == {}


class TestGroupByAuthor:
    """Tests for grouping by author."""

    def test_groups_in_first_appearance_order(self, make_event) -> None:
        """Test author rows appear in order of first commit."""
        events = [
            make_event("a", 0, author="zoe"),
            make_event("b", 1, author="adam"),
            make_event("c", 2, author="zoe"),
        ]
        groups = group_events(events, GroupBy.author)
        assert list(groups) == ["zoe", "adam"]
        assert [e.id for e in groups["zoe"]] == ["a", "c"]

    def test_author_is_case_sensitive(self, make_event) -> None:
        """Test that author names are used as given."""
        events = [make_event("a", 0, author="Bob"), make_event("b", 1, author="bob")]
        assert set(group_events(events, "author")) == {"Bob", "bob"}

    def test_author_whitespace_is_kept(self) -> None:
        """Test that surrounding whitespace in author names survives ingestion."""
        events = normalize_records(
            [
                {"sha": "a", "date": "2024-03-01T09:00:00Z", "author": " alice "},
                {"sha": "b", "date": "2024-03-01T10:00:00Z", "author": "alice"},
            ]
        )
        groups = group_events(events, GroupBy.author)
        assert list(groups) == [" alice ", "alice"]


class TestGroupByDate:
    """Tests for grouping by calendar day."""

    def test_groups_by_day(self, make_event) -> None:
        """Test that events on the same day share a row."""
        events = [
            make_event("a", 1),
            make_event("b", 23),
            make_event("c", 25),
        ]
        groups = group_events(events, GroupBy.date)
        assert list(groups) == ["2024-03-01", "2024-03-02"]
        assert [e.id for e in groups["2024-03-01"]] == ["a", "b"]

    def test_no_timezone_conversion(self, make_event) -> None:
        """Test that the day is taken from the timestamp as given."""
        timestamp = datetime(2024, 3, 1, 23, 30, tzinfo=timezone.utc)
        event = make_event("late", timestamp=timestamp)
        assert group_name(event, GroupBy.date) == "2024-03-01"


class TestPartition:
    """Tests for the strict-partition property."""

    @pytest.mark.parametrize("group_by", list(GroupBy))
    def test_every_event_in_exactly_one_group(self, make_event, group_by) -> None:
        """Test that groups partition the input."""
        events = [
            make_event(f"e{i}", i * 5, ["BUG", "FEATURE", "CHORE"][i % 3],
                       author=f"dev{i % 4}")
            for i in range(20)
        ]
        groups = group_events(events, group_by)
        ids = [e.id for members in groups.values() for e in members]
        assert sorted(ids) == sorted(e.id for e in events)
        assert len(ids) == len(set(ids))
        assert all(members for members in groups.values())

    @pytest.mark.parametrize("group_by", list(GroupBy))
    def test_idempotent(self, make_event, group_by) -> None:
        """Test that identical inputs produce identical groupings."""
        events = [make_event("a", 0, "BUG"), make_event("b", 30, author="bob")]
        assert group_events(events, group_by) == group_events(events, group_by)

    def test_unknown_key_raises(self, make_event) -> None:
        """Test that an unknown grouping key is rejected."""
        with pytest.raises(UnsupportedConfigurationError, match="group-by"):
            group_events([make_event("a")], "branch")
