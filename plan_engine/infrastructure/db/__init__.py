"""
Database implementations of the catalog port.
"""

from plan_engine.infrastructure.db.exercise_catalog import (
    SupabaseExerciseCatalog,
    row_to_exercise,
    row_to_tags,
)

__all__ = [
    "SupabaseExerciseCatalog",
    "row_to_exercise",
    "row_to_tags",
]
