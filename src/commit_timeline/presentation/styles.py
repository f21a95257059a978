"""Category styles for timeline markers and row labels."""

from __future__ import annotations

from pydantic import ConfigDict

from commit_timeline.models.base import BaseSchema
from commit_timeline.models.enums import EventCategory

__all__ = ["CLUSTER_ICON", "DEFAULT_ICON", "CategoryStyle", "category_style"]

DEFAULT_ICON = "git-commit"
CLUSTER_ICON = "layers"


class CategoryStyle(BaseSchema):
    """Visual treatment of a category.

    Attributes:
        color: Color name used for the marker background.
        icon: Icon name drawn inside the marker.
    """

    model_config = ConfigDict(frozen=True)

    color: str
    icon: str


_STYLES = {
    EventCategory.FEATURE: CategoryStyle(color="green", icon="sparkles"),
    EventCategory.WARNING: CategoryStyle(color="amber", icon="alert-triangle"),
    EventCategory.MILESTONE: CategoryStyle(color="purple", icon="trophy"),
    EventCategory.BUG: CategoryStyle(color="red", icon="bug"),
    EventCategory.CHORE: CategoryStyle(color="slate", icon="wrench"),
}

_FALLBACK_STYLE = CategoryStyle(color="gray", icon=DEFAULT_ICON)


def category_style(category: EventCategory | str) -> CategoryStyle:
    """Get the style of a category.

    Args:
        category: Category member or value; category row names are accepted
            as they are.

    Returns:
        The category's style, or a neutral commit style for unknown values.

    """
    try:
        return _STYLES[EventCategory(category)]
    except ValueError:
        return _FALLBACK_STYLE
