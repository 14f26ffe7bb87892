"""
FastAPI dependency providers.

Routers depend on these functions so tests can swap implementations:

    app.dependency_overrides[get_plan_generator] = lambda: PlanGenerator(...)
"""

from functools import lru_cache
from typing import Optional

from plan_engine.engine import build_direct_client, build_plan_generator
from plan_engine.services.llm.client import DirectSuggestionClient
from plan_engine.services.plan_generator import PlanGenerator
from plan_engine.settings import Settings, get_settings as _get_settings


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from plan_engine.settings.
    """
    return _get_settings()


@lru_cache
def _cached_plan_generator() -> PlanGenerator:
    return build_plan_generator(_get_settings())


def get_plan_generator() -> PlanGenerator:
    """Get the process-wide plan generator."""
    return _cached_plan_generator()


@lru_cache
def _cached_provider_client() -> Optional[DirectSuggestionClient]:
    return build_direct_client(_get_settings())


def get_provider_client() -> Optional[DirectSuggestionClient]:
    """
    Get the provider client used by the suggestion proxy endpoint.

    Returns None when no provider key is configured.
    """
    return _cached_provider_client()
