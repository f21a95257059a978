"""Unit tests for the interval generator and axis labels."""

from datetime import datetime, timedelta, timezone

import pytest

from commit_timeline.config.exceptions import UnsupportedConfigurationError
from commit_timeline.engine.intervals import format_time_interval, generate_intervals
from commit_timeline.engine.range import compute_time_range
from commit_timeline.models.enums import TimeScale
from commit_timeline.models.layout import TimeInterval, TimeRange

DAY0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _assert_covers(intervals: list[TimeInterval], time_range: TimeRange) -> None:
    """Assert intervals are contiguous and cover the range exactly."""
    assert intervals
    assert intervals[0].start == time_range.start
    assert intervals[-1].end == time_range.end
    for previous, current in zip(intervals, intervals[1:]):
        assert previous.end == current.start
    for interval in intervals:
        assert interval.start < interval.end


class TestGenerateIntervals:
    """Tests for generate_intervals."""

    def test_ten_days(self) -> None:
        """Test that a ten-day range yields exactly ten one-day intervals."""
        time_range = TimeRange(start=DAY0, end=DAY0 + timedelta(days=10))
        intervals = generate_intervals(time_range, TimeScale.day)
        assert len(intervals) == 10
        assert all(i.end - i.start == timedelta(days=1) for i in intervals)
        _assert_covers(intervals, time_range)

    def test_remainder_is_clipped(self) -> None:
        """Test that a partial final unit is clipped to the range end."""
        end = DAY0 + timedelta(days=10, hours=6)
        time_range = TimeRange(start=DAY0, end=end)
        intervals = generate_intervals(time_range, TimeScale.day)
        assert len(intervals) == 11
        assert intervals[-1].end == end
        assert intervals[-1].end - intervals[-1].start == timedelta(hours=6)

    def test_minimal_range_has_one_interval(self) -> None:
        """Test that a range shorter than a unit still yields one interval."""
        time_range = TimeRange(start=DAY0, end=DAY0 + timedelta(seconds=1))
        intervals = generate_intervals(time_range, TimeScale.year)
        assert intervals == [TimeInterval(start=time_range.start, end=time_range.end)]

    def test_hour_scale(self) -> None:
        """Test one-hour intervals."""
        time_range = TimeRange(start=DAY0, end=DAY0 + timedelta(hours=5))
        intervals = generate_intervals(time_range, "hour")
        assert len(intervals) == 5

    def test_week_scale(self) -> None:
        """Test seven-day intervals."""
        time_range = TimeRange(start=DAY0, end=DAY0 + timedelta(days=21))
        intervals = generate_intervals(time_range, TimeScale.week)
        assert len(intervals) == 3
        assert all(i.end - i.start == timedelta(weeks=1) for i in intervals)

    def test_month_scale_follows_calendar(self) -> None:
        """Test that month intervals land on calendar month boundaries."""
        time_range = TimeRange(start=DAY0, end=datetime(2024, 4, 1, tzinfo=timezone.utc))
        intervals = generate_intervals(time_range, TimeScale.month)
        assert [i.start.month for i in intervals] == [1, 2, 3]
        assert intervals[1].end - intervals[1].start == timedelta(days=29)

    def test_month_scale_does_not_drift(self) -> None:
        """Test that a start on the 31st returns to the 31st where possible."""
        start = datetime(2024, 1, 31, tzinfo=timezone.utc)
        time_range = TimeRange(start=start, end=datetime(2024, 5, 15, tzinfo=timezone.utc))
        intervals = generate_intervals(time_range, TimeScale.month)
        boundaries = [i.end.date().isoformat() for i in intervals]
        assert boundaries == ["2024-02-29", "2024-03-31", "2024-04-30", "2024-05-15"]
        _assert_covers(intervals, time_range)

    def test_year_scale(self) -> None:
        """Test calendar-year intervals."""
        time_range = TimeRange(start=DAY0, end=datetime(2026, 6, 1, tzinfo=timezone.utc))
        intervals = generate_intervals(time_range, TimeScale.year)
        assert [i.start.year for i in intervals] == [2024, 2025, 2026]

    @pytest.mark.parametrize("scale", list(TimeScale))
    def test_computed_ranges_are_covered(self, make_event, scale: TimeScale) -> None:
        """Test contiguity on ranges produced by the range calculator."""
        events = [make_event("a", 0), make_event("b", 24 * 40)]
        time_range = compute_time_range(events, scale)
        _assert_covers(generate_intervals(time_range, scale), time_range)

    def test_empty_month_range_has_intervals(self) -> None:
        """Test that an empty event set at month scale still yields intervals."""
        time_range = compute_time_range([], TimeScale.month)
        intervals = generate_intervals(time_range, TimeScale.month)
        assert len(intervals) >= 1
        _assert_covers(intervals, time_range)

    def test_restartable(self) -> None:
        """Test that repeated calls return identical sequences."""
        time_range = TimeRange(start=DAY0, end=DAY0 + timedelta(days=45))
        assert generate_intervals(time_range, "week") == generate_intervals(
            time_range, "week"
        )

    def test_unknown_scale_raises(self) -> None:
        """Test that an unknown scale is rejected."""
        time_range = TimeRange(start=DAY0, end=DAY0 + timedelta(days=1))
        with pytest.raises(UnsupportedConfigurationError):
            generate_intervals(time_range, "decade")


class TestFormatTimeInterval:
    """Tests for axis label formatting."""

    @pytest.mark.parametrize(
        ("scale", "expected"),
        [
            (TimeScale.hour, "14:00"),
            (TimeScale.day, "Mar 05"),
            (TimeScale.week, "Mar 05"),
            (TimeScale.month, "Mar 2024"),
            (TimeScale.year, "2024"),
        ],
    )
    def test_label_per_scale(self, scale: TimeScale, expected: str) -> None:
        """Test the label format of each scale."""
        start = datetime(2024, 3, 5, 14, 30, tzinfo=timezone.utc)
        interval = TimeInterval(start=start, end=start + timedelta(hours=1))
        assert format_time_interval(interval, scale) == expected

    def test_accepts_string_scale(self) -> None:
        """Test that the scale may be given by value."""
        interval = TimeInterval(start=DAY0, end=DAY0 + timedelta(days=1))
        assert format_time_interval(interval, "year") == "2024"
