"""
Wire schemas for the suggestion proxy.

Field names follow the proxy's camelCase JSON; Python code uses the
snake_case attribute names.
"""

from typing import List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

from plan_engine.domain.models import Difficulty, Exercise, Preferences
from plan_engine.domain.models.exercise import normalize_equipment_list


class SuggestionExercise(BaseModel):
    """An eligible exercise as presented to the AI service."""

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    duration: int = Field(gt=0, description="Duration in seconds")
    description: str = ""
    tags: List[str] = Field(default_factory=list)

    @classmethod
    def from_exercise(cls, exercise: Exercise) -> "SuggestionExercise":
        return cls(
            id=exercise.id,
            name=exercise.name,
            duration=exercise.duration_seconds,
            description=exercise.description,
            tags=list(exercise.tags),
        )

    def to_exercise(self) -> Exercise:
        return Exercise(
            id=self.id,
            name=self.name,
            description=self.description,
            duration_seconds=self.duration,
            tags=self.tags,
        )


class SuggestionPreferences(BaseModel):
    """Preferences as sent to the AI service."""

    model_config = ConfigDict(populate_by_name=True)

    goal: str = ""
    duration_minutes: int = Field(gt=0, alias="durationMinutes")
    difficulty: Difficulty
    equipment: List[str] = Field(min_length=1)

    @field_validator("equipment")
    @classmethod
    def normalize_equipment(cls, v: List[str]) -> List[str]:
        return normalize_equipment_list(v)

    @classmethod
    def from_preferences(cls, preferences: Preferences) -> "SuggestionPreferences":
        return cls(
            goal=preferences.goal,
            duration_minutes=preferences.duration_minutes,
            difficulty=preferences.difficulty,
            equipment=list(preferences.equipment),
        )

    def to_preferences(self) -> Preferences:
        return Preferences(
            goal=self.goal,
            equipment=self.equipment,
            duration_minutes=self.duration_minutes,
            difficulty=self.difficulty,
        )


class SuggestionRequest(BaseModel):
    """Proxy request body: the eligible set plus the user's preferences."""

    exercises: List[SuggestionExercise] = Field(min_length=1)
    preferences: SuggestionPreferences

    @classmethod
    def build(
        cls,
        eligible: Sequence[Exercise],
        preferences: Preferences,
    ) -> "SuggestionRequest":
        return cls(
            exercises=[SuggestionExercise.from_exercise(ex) for ex in eligible],
            preferences=SuggestionPreferences.from_preferences(preferences),
        )

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class SuggestionResponse(BaseModel):
    """Proxy success body."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    selected_exercise_ids: List[str] = Field(alias="selectedExerciseIds")
    raw_response: Optional[str] = Field(default=None, alias="rawResponse")
