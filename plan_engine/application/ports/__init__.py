"""
Port interfaces for the plan engine.

Infrastructure adapters (Supabase catalog, proxy and provider transports)
satisfy these Protocols; tests use in-memory fakes.
"""

from plan_engine.application.ports.exercise_catalog import ExerciseCatalog
from plan_engine.application.ports.suggestion_client import SuggestionClient

__all__ = [
    "ExerciseCatalog",
    "SuggestionClient",
]
