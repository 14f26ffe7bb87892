"""
Suggestion client port (interface).

One implementation per AI transport: the trusted proxy and the direct
provider call.
"""

from typing import List, Protocol, Sequence

from plan_engine.domain.models import Exercise, Preferences


class SuggestionClient(Protocol):
    """A single outbound AI suggestion transport."""

    @property
    def name(self) -> str:
        """Short transport name used in logs."""
        ...

    async def request_ids(
        self,
        eligible: Sequence[Exercise],
        preferences: Preferences,
    ) -> List[str]:
        """
        Ask the AI service for an ordered list of exercise ids.

        Makes exactly one outbound request. Ids are returned unvalidated;
        the suggestion adapter intersects them with the eligible set.

        Args:
            eligible: Exercises the service may choose from
            preferences: The user's preferences

        Returns:
            Suggested exercise ids in execution order

        Raises:
            SuggestionTransportError: Network failure, timeout or non-2xx status
            SuggestionParseError: Empty or malformed response body
        """
        ...
