"""Validation of layout configuration values.

The layout engine only accepts members of its closed enumerations. These
helpers convert raw values at the call boundary and reject anything else;
there is no silent fallback to a default.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from commit_timeline.config.exceptions import UnsupportedConfigurationError
from commit_timeline.models.enums import GroupBy, TimeScale

__all__ = ["resolve_group_by", "resolve_time_scale"]

E = TypeVar("E", bound=Enum)


def _resolve(value: object, enum_type: type[E], label: str) -> E:
    if isinstance(value, enum_type):
        return value
    if isinstance(value, str):
        try:
            return enum_type(value.strip().lower())
        except ValueError:
            pass
    allowed = ", ".join(member.value for member in enum_type)
    raise UnsupportedConfigurationError(
        f"Unsupported {label} {value!r}: expected one of {allowed}"
    )


def resolve_time_scale(value: TimeScale | str) -> TimeScale:
    """Convert a raw value into a TimeScale.

    Args:
        value: A TimeScale member or its string value (case-insensitive).

    Returns:
        The matching TimeScale.

    Raises:
        UnsupportedConfigurationError: If the value names no time scale.

    """
    return _resolve(value, TimeScale, "time scale")


def resolve_group_by(value: GroupBy | str) -> GroupBy:
    """Convert a raw value into a GroupBy key.

    Args:
        value: A GroupBy member or its string value (case-insensitive).

    Returns:
        The matching GroupBy key.

    Raises:
        UnsupportedConfigurationError: If the value names no grouping key.

    """
    return _resolve(value, GroupBy, "group-by key")
