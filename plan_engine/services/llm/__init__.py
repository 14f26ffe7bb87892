"""
LLM integration for AI-suggested exercise ordering.
"""

from plan_engine.services.llm.adapter import SuggestionAdapter, validate_ids
from plan_engine.services.llm.client import DirectSuggestionClient
from plan_engine.services.llm.parsing import ParseResult, parse_suggestion_text
from plan_engine.services.llm.schemas import (
    SuggestionExercise,
    SuggestionPreferences,
    SuggestionRequest,
    SuggestionResponse,
)

__all__ = [
    "DirectSuggestionClient",
    "ParseResult",
    "SuggestionAdapter",
    "SuggestionExercise",
    "SuggestionPreferences",
    "SuggestionRequest",
    "SuggestionResponse",
    "parse_suggestion_text",
    "validate_ids",
]
