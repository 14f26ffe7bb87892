"""
Fake exercise catalogs for testing.
"""

from typing import Dict, List, Optional, Sequence

from plan_engine.domain.models import Exercise


def make_exercise(
    exercise_id: str,
    duration: int = 30,
    equipment: Optional[str] = "bodyweight",
    difficulty: Optional[str] = "beginner",
    extra_tags: Sequence[str] = (),
    name: Optional[str] = None,
) -> Exercise:
    """Build an exercise with the usual tags; pass None to omit a facet."""
    tags = []
    if equipment is not None:
        tags.append(f"equipment:{equipment}")
    if difficulty is not None:
        tags.append(f"difficulty:{difficulty}")
    tags.extend(extra_tags)
    return Exercise(
        id=exercise_id,
        name=name or exercise_id.replace("-", " ").title(),
        description=f"How to do {exercise_id}",
        duration_seconds=duration,
        tags=tags,
    )


class FakeExerciseCatalog:
    """
    In-memory fake implementation of ExerciseCatalog.

    Stores exercises in a dictionary and counts reads.
    """

    def __init__(self, exercises: Optional[Sequence[Exercise]] = None):
        self._exercises: Dict[str, Exercise] = {}
        self.call_count = 0
        if exercises:
            self.seed(exercises)

    # -------------------------------------------------------------------------
    # Test Helpers
    # -------------------------------------------------------------------------

    def seed(self, exercises: Sequence[Exercise]) -> None:
        for exercise in exercises:
            self._exercises[exercise.id] = exercise

    def seed_default_exercises(self) -> None:
        """Seed with a small mixed catalog."""
        self.seed([
            make_exercise("squat", 45),
            make_exercise("knee-push-up", 30),
            make_exercise("jumping-jacks", 60),
            make_exercise("plank", 30),
            make_exercise("push-up", 40, difficulty="intermediate"),
            make_exercise("burpees", 40, difficulty="advanced"),
            make_exercise("db-row", 45, equipment="dumbbell", difficulty="intermediate"),
            make_exercise("goblet-squat", 45, equipment="dumbbell", difficulty="intermediate"),
            make_exercise("face-pull", 40, equipment="band"),
        ])

    def clear(self) -> None:
        self._exercises.clear()

    # -------------------------------------------------------------------------
    # ExerciseCatalog Interface
    # -------------------------------------------------------------------------

    async def get_exercises(self) -> List[Exercise]:
        self.call_count += 1
        return list(self._exercises.values())


class FailingExerciseCatalog:
    """Catalog whose reads always raise."""

    def __init__(self, error: Optional[Exception] = None):
        self._error = error or ConnectionError("catalog offline")

    async def get_exercises(self) -> List[Exercise]:
        raise self._error
