"""
Pytest fixtures for plan engine tests.
"""

import random
from typing import List

import pytest

from plan_engine.domain.models import Difficulty, Exercise, Preferences
from plan_engine.settings import Settings, get_settings
from tests.fakes import FakeExerciseCatalog
from tests.fakes.exercise_catalog import make_exercise


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings fresh."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with no external services configured."""
    return Settings(
        environment="test",
        _env_file=None,
        supabase_url=None,
        suggestion_proxy_url=None,
        gemini_api_key=None,
        sentry_dsn=None,
    )


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def exercise_catalog() -> FakeExerciseCatalog:
    catalog = FakeExerciseCatalog()
    catalog.seed_default_exercises()
    return catalog


@pytest.fixture
def catalog_exercises(exercise_catalog) -> List[Exercise]:
    return list(exercise_catalog._exercises.values())


@pytest.fixture
def beginner_bodyweight() -> Preferences:
    return Preferences(
        goal="muscle",
        equipment=["bodyweight"],
        duration_minutes=5,
        difficulty=Difficulty.BEGINNER,
    )


@pytest.fixture
def intermediate_full() -> Preferences:
    return Preferences(
        goal="fat-loss",
        equipment=["bodyweight", "dumbbell", "band"],
        duration_minutes=10,
        difficulty=Difficulty.INTERMEDIATE,
    )


@pytest.fixture
def uuid_exercises() -> List[Exercise]:
    """Exercises with UUID ids, as stored in the database."""
    return [
        make_exercise("3f1c2a4e-0b7d-4e8a-9c11-2d3e4f5a6b01", 40, name="Squat"),
        make_exercise("3f1c2a4e-0b7d-4e8a-9c11-2d3e4f5a6b02", 40, name="Lunge"),
        make_exercise("3f1c2a4e-0b7d-4e8a-9c11-2d3e4f5a6b03", 40, name="Plank"),
        make_exercise("3f1c2a4e-0b7d-4e8a-9c11-2d3e4f5a6b04", 40, name="Bridge"),
    ]
