"""
Domain models for plan generation.

All models are immutable pydantic value objects; nothing downstream of the
tag classifier reads raw tag strings.
"""

from plan_engine.domain.models.exercise import (
    Difficulty,
    Exercise,
    Preferences,
    TagFacets,
)
from plan_engine.domain.models.plan import (
    GenerationResult,
    GenerationTier,
    PlanItem,
    PlanItemKind,
    count_exercises,
    total_duration,
)

__all__ = [
    "Difficulty",
    "Exercise",
    "GenerationResult",
    "GenerationTier",
    "PlanItem",
    "PlanItemKind",
    "Preferences",
    "TagFacets",
    "count_exercises",
    "total_duration",
]
