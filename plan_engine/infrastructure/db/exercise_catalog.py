"""
Supabase implementation of ExerciseCatalog.

Rows in the ``exercises`` table carry structured columns (difficulty,
training_goals, equipment, target_muscles); they are flattened into the
``facet:value`` tags the engine classifies.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError
from supabase import Client

from plan_engine.domain.models import Exercise
from plan_engine.services.tag_classifier import BODYWEIGHT

logger = logging.getLogger(__name__)

# Database goal values -> catalog goal labels
GOAL_MAP: Dict[str, str] = {
    "strength": "muscle",
    "muscle_gain": "muscle",
    "fat_loss": "fat-loss",
    "endurance": "tone",
}


def row_to_tags(row: Dict[str, Any]) -> List[str]:
    """
    Flatten an exercises row into ``facet:value`` tags.

    No equipment means bodyweight. The movement type comes from the target
    muscles: core -> core, full_body -> cardio, anything else -> strength.
    """
    tags: List[str] = []

    if row.get("difficulty"):
        tags.append(f"difficulty:{row['difficulty']}")

    for goal in row.get("training_goals") or []:
        tag = f"goal:{GOAL_MAP.get(goal, goal)}"
        if tag not in tags:
            tags.append(tag)

    equipment = row.get("equipment") or []
    if equipment:
        tags.extend(f"equipment:{item}" for item in equipment)
    else:
        tags.append(f"equipment:{BODYWEIGHT}")

    muscles = row.get("target_muscles")
    if isinstance(muscles, list):
        if "core" in muscles:
            tags.append("type:core")
        elif "full_body" in muscles:
            tags.append("type:cardio")
        else:
            tags.append("type:strength")

    return tags


def row_to_exercise(row: Dict[str, Any]) -> Optional[Exercise]:
    """Convert a row to an Exercise, or None if the row is unusable."""
    try:
        return Exercise(
            id=str(row["id"]),
            name=row["name"],
            description=row.get("description") or "",
            video_url=row.get("video_url") or "",
            duration_seconds=row["duration_seconds"],
            tags=row_to_tags(row),
        )
    except (KeyError, TypeError, ValidationError) as e:
        logger.warning(f"Skipping malformed exercise row {row.get('id')}: {e}")
        return None


class SupabaseExerciseCatalog:
    """
    Supabase-backed exercise catalog.

    The Supabase client is synchronous; queries run in the default executor.
    """

    def __init__(self, client: Client):
        """
        Initialize catalog with Supabase client.

        Args:
            client: Authenticated Supabase client
        """
        self._client = client

    def _fetch_rows(self) -> List[Dict[str, Any]]:
        response = (
            self._client.table("exercises")
            .select("*")
            .eq("is_active", True)
            .execute()
        )
        return response.data or []

    async def get_exercises(self) -> List[Exercise]:
        loop = asyncio.get_running_loop()
        rows = await loop.run_in_executor(None, self._fetch_rows)
        exercises = [ex for ex in (row_to_exercise(row) for row in rows) if ex is not None]
        logger.debug(f"Loaded {len(exercises)} exercises from Supabase")
        return exercises
