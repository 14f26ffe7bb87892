"""
Plan generation router.

POST /plans turns a questionnaire into a timed exercise/rest plan.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from plan_engine.api.deps import get_plan_generator
from plan_engine.application.exceptions import CatalogUnavailable, NoEligibleExercises
from plan_engine.domain.models import GenerationTier, PlanItem, Preferences
from plan_engine.services.plan_generator import PlanGenerator

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/plans",
    tags=["Plans"],
)


class PlanResponse(BaseModel):
    """Generated plan plus how it was produced."""

    items: List[PlanItem]
    tier: GenerationTier
    widened: bool
    total_seconds: int
    exercise_count: int


@router.post("", response_model=PlanResponse)
async def create_plan(
    preferences: Preferences,
    generator: PlanGenerator = Depends(get_plan_generator),
):
    """
    Generate a workout plan.

    Returns 422 when no exercise matches the preferences (even after
    widening to bodyweight) and 503 when no catalog could be read.
    """
    try:
        result = await generator.generate(preferences)
    except NoEligibleExercises as e:
        raise HTTPException(status_code=422, detail=str(e))
    except CatalogUnavailable as e:
        raise HTTPException(status_code=503, detail=str(e))

    return PlanResponse(
        items=result.items,
        tier=result.tier,
        widened=result.widened,
        total_seconds=result.total_seconds,
        exercise_count=result.exercise_count,
    )
