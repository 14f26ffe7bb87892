"""
Unit tests for the tag classifier.
"""

import pytest

from plan_engine.domain.models import Difficulty, Exercise
from plan_engine.services.tag_classifier import (
    classify,
    normalize_equipment,
    parse_difficulty,
    tag_values,
)


def exercise_with(tags):
    return Exercise(id="ex", name="Exercise", duration_seconds=30, tags=tags)


@pytest.mark.unit
class TestTagValues:
    def test_returns_values_for_facet(self):
        tags = ["goal:muscle", "difficulty:beginner", "goal:tone"]
        assert tag_values(tags, "goal") == ["muscle", "tone"]

    def test_ignores_other_prefixes(self):
        assert tag_values(["equipment:band"], "goal") == []

    def test_ignores_empty_values(self):
        assert tag_values(["goal:", "goal:tone"], "goal") == ["tone"]

    def test_does_not_match_facet_name_prefix(self):
        """'goals:x' is not a 'goal' tag."""
        assert tag_values(["goals:x"], "goal") == []


@pytest.mark.unit
class TestNormalization:
    @pytest.mark.parametrize(
        "label,expected",
        [
            ("徒手", "bodyweight"),
            ("啞鈴", "dumbbell"),
            ("彈力帶", "band"),
            ("壺鈴", "kettlebell"),
            ("Dumbbells", "dumbbell"),
            ("bodyweight", "bodyweight"),
            ("barbell", "barbell"),
        ],
    )
    def test_equipment_labels(self, label, expected):
        assert normalize_equipment(label) == expected

    @pytest.mark.parametrize(
        "label,expected",
        [
            ("初階", Difficulty.BEGINNER),
            ("中階", Difficulty.INTERMEDIATE),
            ("高階", Difficulty.ADVANCED),
            ("Advanced", Difficulty.ADVANCED),
            ("expert", None),
        ],
    )
    def test_difficulty_labels(self, label, expected):
        assert parse_difficulty(label) == expected


@pytest.mark.unit
class TestClassify:
    def test_classifies_all_facets(self):
        facets = classify(exercise_with([
            "equipment:dumbbell",
            "difficulty:intermediate",
            "type:strength",
            "goal:muscle",
        ]))

        assert facets.equipment == {"dumbbell"}
        assert facets.difficulty == {Difficulty.INTERMEDIATE}
        assert facets.types == {"strength"}
        assert facets.goals == {"muscle"}

    def test_missing_equipment_is_bodyweight(self):
        facets = classify(exercise_with(["difficulty:advanced"]))
        assert facets.equipment == {"bodyweight"}

    def test_missing_difficulty_is_beginner(self):
        facets = classify(exercise_with(["equipment:band"]))
        assert facets.difficulty == {Difficulty.BEGINNER}

    def test_unrecognized_difficulty_ranks_as_advanced(self):
        facets = classify(exercise_with(["difficulty:expert"]))
        assert facets.difficulty == {Difficulty.ADVANCED}

    def test_unrecognized_difficulty_ignored_beside_known_level(self):
        facets = classify(exercise_with(["difficulty:expert", "difficulty:intermediate"]))
        assert facets.difficulty == {Difficulty.INTERMEDIATE}

    def test_empty_difficulty_value_counts_as_missing(self):
        facets = classify(exercise_with(["difficulty:"]))
        assert facets.difficulty == {Difficulty.BEGINNER}

    def test_multiple_difficulties_are_kept(self):
        facets = classify(exercise_with(["difficulty:中階", "difficulty:高階"]))
        assert facets.difficulty == {Difficulty.INTERMEDIATE, Difficulty.ADVANCED}

    def test_localized_tags(self):
        facets = classify(exercise_with(["equipment:啞鈴", "difficulty:初階"]))
        assert facets.equipment == {"dumbbell"}
        assert facets.difficulty == {Difficulty.BEGINNER}

    def test_no_tags(self):
        facets = classify(exercise_with([]))
        assert facets.equipment == {"bodyweight"}
        assert facets.difficulty == {Difficulty.BEGINNER}
        assert facets.types == frozenset()

    def test_malformed_tags_are_ignored(self):
        exercise = Exercise(id="ex", name="Exercise", duration_seconds=30, tags=None)
        assert exercise.tags == []
        assert classify(exercise).equipment == {"bodyweight"}
