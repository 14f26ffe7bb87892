"""
Infrastructure adapters: suggestion proxy transport and exercise catalogs.
"""

from plan_engine.infrastructure.catalog import (
    FallbackExerciseCatalog,
    load_catalog,
)
from plan_engine.infrastructure.default_exercises import DEFAULT_EXERCISES
from plan_engine.infrastructure.suggestion_proxy_client import ProxySuggestionClient

__all__ = [
    "DEFAULT_EXERCISES",
    "FallbackExerciseCatalog",
    "ProxySuggestionClient",
    "load_catalog",
]
