"""
Application-layer exceptions.

Only ``CatalogUnavailable`` and ``NoEligibleExercises`` ever escape the
plan generator. Every ``SuggestionError`` is absorbed by the fallback chain.
"""

from typing import Optional


class PlanEngineError(Exception):
    """Base class for plan engine errors."""

    pass


class CatalogUnavailable(PlanEngineError):
    """No exercises could be obtained from the catalog at all.

    The caller is expected to substitute a curated default set.
    """

    pass


class NoEligibleExercises(PlanEngineError):
    """Filtering left nothing, even after widening to bodyweight exercises."""

    pass


class SuggestionError(PlanEngineError):
    """Base class for AI suggestion failures."""

    pass


class SuggestionTransportError(SuggestionError):
    """Network failure, timeout or non-2xx response from a suggestion transport."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class SuggestionParseError(SuggestionError):
    """The suggestion response was empty, malformed or held no exercise ids."""

    pass


class SuggestionInsufficient(SuggestionError):
    """Fewer than the minimum number of suggested ids survived validation."""

    def __init__(self, message: str, validated_count: int):
        super().__init__(message)
        self.validated_count = validated_count
