"""
Suggestion proxy router.

POST /generate-workout is the server side of the proxy transport: it keeps
the provider credential off clients, asks the model for an ordering and
returns the ids it could read from the answer.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from plan_engine.api.deps import get_provider_client, get_settings
from plan_engine.application.exceptions import SuggestionParseError, SuggestionTransportError
from plan_engine.services.llm.client import DirectSuggestionClient
from plan_engine.services.llm.parsing import parse_suggestion_text
from plan_engine.services.llm.prompts import build_exercise_ordering_prompt
from plan_engine.services.llm.schemas import SuggestionRequest, SuggestionResponse
from plan_engine.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Suggestions"],
)


@router.post("/generate-workout", response_model=SuggestionResponse)
async def generate_workout(
    request: SuggestionRequest,
    client: Optional[DirectSuggestionClient] = Depends(get_provider_client),
    settings: Settings = Depends(get_settings),
):
    """
    Ask the provider to pick and order exercises.

    Responds ``{"success": true, "selectedExerciseIds": [...], "rawResponse": "..."}``.
    Provider errors map to 502; a missing provider key to 500.
    """
    if client is None:
        logger.error("Suggestion proxy called without a provider key configured")
        return JSONResponse(status_code=500, content={"error": "AI service not configured"})

    try:
        eligible = [ex.to_exercise() for ex in request.exercises]
        preferences = request.preferences.to_preferences()
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    prompt = build_exercise_ordering_prompt(eligible, preferences, settings.rest_seconds)

    try:
        text = await client.complete(prompt)
    except SuggestionTransportError as e:
        logger.warning(f"Provider error in suggestion proxy: {e}")
        return JSONResponse(
            status_code=502,
            content={"error": "AI service error", "details": e.status_code},
        )
    except SuggestionParseError as e:
        logger.warning(f"Unreadable provider response in suggestion proxy: {e}")
        return JSONResponse(status_code=502, content={"error": "Invalid AI response format"})

    result = parse_suggestion_text(text)
    if not result.ok:
        logger.warning(f"Suggestion proxy found no ids: {result.error}")

    return SuggestionResponse(
        success=True,
        selected_exercise_ids=result.ids,
        raw_response=text,
    )
