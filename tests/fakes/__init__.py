"""
Fake implementations for testing.

In-memory fakes of the catalog and suggestion transports for fast,
isolated tests without network access.
"""

from tests.fakes.exercise_catalog import FailingExerciseCatalog, FakeExerciseCatalog
from tests.fakes.suggestion_client import (
    FailingSuggestionClient,
    FakeSuggestionClient,
    SlowSuggestionClient,
)

__all__ = [
    "FailingExerciseCatalog",
    "FailingSuggestionClient",
    "FakeExerciseCatalog",
    "FakeSuggestionClient",
    "SlowSuggestionClient",
]
