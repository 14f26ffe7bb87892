"""
LLM prompt templates for exercise ordering.

The model picks and orders exercises from the eligible list and answers
with a bare JSON array of ids.
"""

import json
from typing import Sequence

from plan_engine.core.constants import DEFAULT_REST_SECONDS
from plan_engine.core.sanitization import sanitize_user_input
from plan_engine.domain.models import Difficulty, Exercise, Preferences
from plan_engine.services.llm.schemas import SuggestionExercise

GOAL_LABELS = {
    "muscle": "Muscle building",
    "fat-loss": "Fat loss",
    "tone": "Toning and sculpting",
    "flexibility": "Flexibility",
}

DIFFICULTY_LABELS = {
    Difficulty.BEGINNER: "Beginner",
    Difficulty.INTERMEDIATE: "Intermediate",
    Difficulty.ADVANCED: "Advanced",
}

EQUIPMENT_LABELS = {
    "bodyweight": "Bodyweight",
    "dumbbell": "Dumbbells",
    "band": "Resistance band",
    "kettlebell": "Kettlebell",
}

EXERCISE_ORDERING_SYSTEM_PROMPT = """You are a professional fitness coach building a single timed workout session.

You only ever choose exercises from the list you are given, and you answer
with a JSON array of exercise ids and nothing else.
"""

EXERCISE_ORDERING_USER_PROMPT = """Select and order exercises from the list below to build one workout session.

## User Requirements
- **Training goal**: {goal}
- **Session length**: {duration_minutes} minutes
- **Difficulty**: {difficulty}
- **Available equipment**: {equipment}

## Available Exercises
{exercises_json}

## Design Rules
1. Total training time, including rest, should be close to {duration_minutes} minutes
2. There is a {rest_seconds} second rest between consecutive exercises
3. Choose varied exercises and avoid working the same muscle group back to back
4. Prefer the exercises that best fit the training goal
5. Order the session sensibly (warm-up movements first, then the main work)

## Response Format
Return only the ids of the chosen exercises as a JSON array, in execution order.
Example: ["id1", "id2", "id3"]

Reply with the JSON array only, without any other text.
"""


def goal_label(goal: str) -> str:
    """Human-readable goal, falling back to the sanitized raw value."""
    if goal in GOAL_LABELS:
        return GOAL_LABELS[goal]
    return sanitize_user_input(goal) or "General fitness"


def build_exercise_ordering_prompt(
    eligible: Sequence[Exercise],
    preferences: Preferences,
    rest_seconds: int = DEFAULT_REST_SECONDS,
) -> str:
    """
    Build the user prompt for exercise ordering.

    Args:
        eligible: Exercises the model may choose from
        preferences: The user's preferences
        rest_seconds: Rest between exercises, stated so the model can budget time

    Returns:
        Formatted user prompt string
    """
    exercises_json = json.dumps(
        [SuggestionExercise.from_exercise(ex).model_dump() for ex in eligible],
        ensure_ascii=False,
        indent=2,
    )
    equipment = ", ".join(
        EQUIPMENT_LABELS.get(item, sanitize_user_input(item)) for item in preferences.equipment
    )

    return EXERCISE_ORDERING_USER_PROMPT.format(
        goal=goal_label(preferences.goal),
        duration_minutes=preferences.duration_minutes,
        difficulty=DIFFICULTY_LABELS[preferences.difficulty],
        equipment=equipment or "Bodyweight only",
        exercises_json=exercises_json,
        rest_seconds=rest_seconds,
    )
