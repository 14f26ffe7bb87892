"""
Router package for the plan engine API.

- health: Liveness check
- plans: Plan generation
- suggestions: Trusted AI suggestion proxy
"""

from plan_engine.api.routers.health import router as health_router
from plan_engine.api.routers.plans import router as plans_router
from plan_engine.api.routers.suggestions import router as suggestions_router

__all__ = [
    "health_router",
    "plans_router",
    "suggestions_router",
]
