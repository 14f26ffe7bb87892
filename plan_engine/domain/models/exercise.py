"""
Exercise, facet and preference value objects.

Exercises come from the catalog with free-text ``facet:value`` tags
(e.g. ``equipment:dumbbell``, ``difficulty:beginner``). The tag classifier
turns those into a typed ``TagFacets`` record once per request.
"""

from enum import Enum
from typing import FrozenSet, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Difficulty(str, Enum):
    """Ordered difficulty levels: beginner < intermediate < advanced."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @property
    def rank(self) -> int:
        return _DIFFICULTY_RANK[self]

    def admits(self, level: "Difficulty") -> bool:
        """Return True if an exercise at ``level`` is allowed under this ceiling."""
        return level.rank <= self.rank


_DIFFICULTY_RANK = {
    Difficulty.BEGINNER: 0,
    Difficulty.INTERMEDIATE: 1,
    Difficulty.ADVANCED: 2,
}


class Exercise(BaseModel):
    """
    Catalog exercise.

    Owned by the catalog; the engine never mutates it. ``duration_seconds``
    is the canonical time the exercise occupies in a plan.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Stable exercise identifier")
    name: str = Field(..., min_length=1, description="Display name")
    description: str = Field(default="", description="Instructional text")
    video_url: str = Field(default="", description="Demonstration media URL")
    duration_seconds: int = Field(..., gt=0, description="Canonical duration in seconds")
    tags: List[str] = Field(
        default_factory=list,
        description="Free-text tags of the form 'facet:value'",
    )

    @field_validator("tags", mode="before")
    @classmethod
    def coerce_tags(cls, v):
        """Treat a missing or malformed tag list as empty."""
        if not isinstance(v, (list, tuple)):
            return []
        return [t for t in v if isinstance(t, str)]


class TagFacets(BaseModel):
    """
    Typed facet record derived from an exercise's tags.

    Every facet is a set because the catalog may tag one exercise with
    several values (e.g. valid at both intermediate and advanced).
    """

    model_config = ConfigDict(frozen=True)

    equipment: FrozenSet[str]
    difficulty: FrozenSet[Difficulty]
    types: FrozenSet[str] = frozenset()
    goals: FrozenSet[str] = frozenset()


def normalize_equipment_list(values: List[str]) -> List[str]:
    """Lowercase, strip and de-duplicate equipment names; at least one must remain."""
    normalized = []
    for item in values:
        value = item.strip().lower()
        if value and value not in normalized:
            normalized.append(value)
    if not normalized:
        raise ValueError("equipment must contain at least one non-empty value")
    return normalized


class Preferences(BaseModel):
    """Questionnaire answers for one generation request."""

    model_config = ConfigDict(frozen=True)

    goal: str = Field(default="", description="Training goal; a soft signal only")
    equipment: List[str] = Field(
        ..., min_length=1, description="Equipment the user owns (e.g. bodyweight, dumbbell)"
    )
    duration_minutes: int = Field(..., gt=0, description="Target session length in minutes")
    difficulty: Difficulty = Field(..., description="Difficulty ceiling")

    @field_validator("equipment")
    @classmethod
    def normalize_equipment(cls, v: List[str]) -> List[str]:
        return normalize_equipment_list(v)

    @property
    def target_seconds(self) -> int:
        return self.duration_minutes * 60
