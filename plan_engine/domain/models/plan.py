"""
Plan value objects.

A plan is an ordered list of ``PlanItem``: exercise intervals separated by
single rest intervals, never starting or ending on a rest.
"""

from enum import Enum
from typing import List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, model_validator

from plan_engine.domain.models.exercise import Exercise

REST_TITLE = "Rest"


class PlanItemKind(str, Enum):
    EXERCISE = "exercise"
    REST = "rest"


class PlanItem(BaseModel):
    """One timed interval of a plan."""

    model_config = ConfigDict(frozen=True)

    kind: PlanItemKind
    duration_seconds: int = Field(..., gt=0)
    title: str
    exercise: Optional[Exercise] = None

    @model_validator(mode="after")
    def check_exercise_reference(self) -> "PlanItem":
        if self.kind == PlanItemKind.EXERCISE and self.exercise is None:
            raise ValueError("exercise items must reference an exercise")
        if self.kind == PlanItemKind.REST and self.exercise is not None:
            raise ValueError("rest items must not reference an exercise")
        return self

    @classmethod
    def for_exercise(cls, exercise: Exercise) -> "PlanItem":
        return cls(
            kind=PlanItemKind.EXERCISE,
            duration_seconds=exercise.duration_seconds,
            title=exercise.name,
            exercise=exercise,
        )

    @classmethod
    def rest(cls, seconds: int) -> "PlanItem":
        return cls(kind=PlanItemKind.REST, duration_seconds=seconds, title=REST_TITLE)

    @property
    def is_exercise(self) -> bool:
        return self.kind == PlanItemKind.EXERCISE


class GenerationTier(str, Enum):
    """Strategy that produced a plan, in the order they are attempted."""

    PROXY = "proxy"
    DIRECT = "direct"
    LOCAL = "local"


class GenerationResult(BaseModel):
    """A generated plan plus the tier that produced it."""

    model_config = ConfigDict(frozen=True)

    items: List[PlanItem]
    tier: GenerationTier
    widened: bool = Field(
        default=False,
        description="True when the eligible set came from the bodyweight-only widening",
    )
    failed_tiers: List[GenerationTier] = Field(default_factory=list)

    @property
    def total_seconds(self) -> int:
        return total_duration(self.items)

    @property
    def exercise_count(self) -> int:
        return count_exercises(self.items)


def total_duration(items: Sequence[PlanItem]) -> int:
    return sum(item.duration_seconds for item in items)


def count_exercises(items: Sequence[PlanItem]) -> int:
    return sum(1 for item in items if item.is_exercise)
