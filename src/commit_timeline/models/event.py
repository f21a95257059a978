"""Event and Analysis models for commit-timeline.

An Event is one commit placed on the timeline. Analyses are optional
annotations; only the first one is consulted for layout decisions. Text
fields are kept verbatim, surrounding whitespace included.
"""

from datetime import datetime

from pydantic import ConfigDict, Field

from commit_timeline.models.base import BaseSchema
from commit_timeline.models.enums import EventCategory

__all__ = ["DEFAULT_CATEGORY", "Analysis", "Event", "effective_category"]

DEFAULT_CATEGORY = EventCategory.CHORE


class Analysis(BaseSchema):
    """Categorization attached to an event.

    Attributes:
        category: Category of the change.
        title: Short human-readable title.
        idea: Longer free-text rationale.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=False)

    category: EventCategory
    title: str = ""
    idea: str = ""


class Event(BaseSchema):
    """A timestamped commit to be placed on the timeline.

    Attributes:
        id: Stable unique identifier (the commit sha).
        timestamp: When the commit was made.
        author: Commit author, used verbatim for author grouping.
        message: Short commit message.
        description: Optional long description.
        analyses: Attached analyses in stored order (may be empty).
    """

    model_config = ConfigDict(
        frozen=True, extra="ignore", str_strip_whitespace=False
    )

    id: str = Field(..., min_length=1)
    timestamp: datetime
    author: str = ""
    message: str = ""
    description: str | None = None
    analyses: tuple[Analysis, ...] = ()

    @property
    def primary_analysis(self) -> Analysis | None:
        """Get the first analysis, or None when the event has none."""
        return self.analyses[0] if self.analyses else None


def effective_category(event: Event) -> EventCategory:
    """Resolve the category used for grouping, clustering and coloring.

    Args:
        event: The event to classify.

    Returns:
        The category of the first analysis, or DEFAULT_CATEGORY when the
        event has no analyses.

    """
    analysis = event.primary_analysis
    if analysis is None:
        return DEFAULT_CATEGORY
    return analysis.category
