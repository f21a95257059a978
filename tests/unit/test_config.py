"""Unit tests for settings and configuration validators."""

import pytest
from pydantic import ValidationError

from commit_timeline.config.defaults import DEFAULT_BUCKET_RESOLUTION
from commit_timeline.config.exceptions import (
    ConfigurationError,
    UnsupportedConfigurationError,
)
from commit_timeline.config.settings import LayoutSettings, get_settings
from commit_timeline.config.validators import resolve_group_by, resolve_time_scale
from commit_timeline.exceptions import CommitTimelineError
from commit_timeline.models.enums import GroupBy, TimeScale


class TestSettings:
    """Tests for pydantic-settings configuration."""

    def test_defaults(self) -> None:
        """Test the default layout and store settings."""
        settings = get_settings()
        assert settings.layout.default_scale == TimeScale.day
        assert settings.layout.default_group_by == GroupBy.type
        assert settings.layout.bucket_resolution == DEFAULT_BUCKET_RESOLUTION
        assert settings.store.events_path == "commits.json"

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that environment variables override defaults."""
        monkeypatch.setenv("COMMIT_TIMELINE_LAYOUT_DEFAULT_SCALE", "month")
        monkeypatch.setenv("COMMIT_TIMELINE_LAYOUT_BUCKET_RESOLUTION", "50")
        monkeypatch.setenv("COMMIT_TIMELINE_STORE_EVENTS_PATH", "/data/commits.yaml")
        settings = get_settings()
        assert settings.layout.default_scale == TimeScale.month
        assert settings.layout.bucket_resolution == 50
        assert settings.store.events_path == "/data/commits.yaml"

    def test_cached(self) -> None:
        """Test that get_settings returns the same instance."""
        assert get_settings() is get_settings()

    def test_resolution_bounds(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that an out-of-range resolution is rejected."""
        monkeypatch.setenv("COMMIT_TIMELINE_LAYOUT_BUCKET_RESOLUTION", "0")
        with pytest.raises(ValidationError):
            LayoutSettings()

    def test_unknown_scale_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that an unknown default scale is rejected."""
        monkeypatch.setenv("COMMIT_TIMELINE_LAYOUT_DEFAULT_SCALE", "decade")
        with pytest.raises(ValidationError):
            LayoutSettings()


class TestResolvers:
    """Tests for resolve_time_scale and resolve_group_by."""

    def test_enum_member_passes_through(self) -> None:
        """Test that members are returned unchanged."""
        assert resolve_time_scale(TimeScale.week) is TimeScale.week
        assert resolve_group_by(GroupBy.date) is GroupBy.date

    def test_string_values(self) -> None:
        """Test lookup by value, ignoring case and whitespace."""
        assert resolve_time_scale(" Month ") is TimeScale.month
        assert resolve_group_by("AUTHOR") is GroupBy.author

    def test_unknown_scale(self) -> None:
        """Test that unknown scales raise with the allowed values listed."""
        with pytest.raises(UnsupportedConfigurationError, match="hour, day, week"):
            resolve_time_scale("quarter")

    def test_unknown_group_by(self) -> None:
        """Test that unknown grouping keys raise."""
        with pytest.raises(UnsupportedConfigurationError):
            resolve_group_by("branch")

    def test_non_string_rejected(self) -> None:
        """Test that non-string values raise instead of defaulting."""
        with pytest.raises(UnsupportedConfigurationError):
            resolve_time_scale(None)  # type: ignore[arg-type]

    def test_error_hierarchy(self) -> None:
        """Test that configuration errors share the package root."""
        assert issubclass(UnsupportedConfigurationError, ConfigurationError)
        assert issubclass(ConfigurationError, CommitTimelineError)
