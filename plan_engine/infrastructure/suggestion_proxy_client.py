"""
HTTP client for the trusted suggestion proxy.

The proxy holds the provider credential server-side (a Supabase edge
function or this service's own ``/generate-workout`` endpoint). It answers
``{"success": true, "selectedExerciseIds": [...]}``.
"""

import json
import logging
from typing import Dict, List, Optional, Sequence

import httpx
from pydantic import ValidationError

from plan_engine.application.exceptions import (
    SuggestionParseError,
    SuggestionTransportError,
)
from plan_engine.domain.models import Exercise, Preferences
from plan_engine.services.llm.parsing import parse_suggestion_text
from plan_engine.services.llm.schemas import SuggestionRequest, SuggestionResponse

logger = logging.getLogger(__name__)


class ProxySuggestionClient:
    """
    Suggestion client for the proxy transport.

    One POST per call, no internal retries.
    """

    def __init__(
        self,
        url: str,
        api_key: Optional[str] = None,
        timeout: float = 10.0,
    ):
        """
        Initialize the proxy client.

        Args:
            url: Full URL of the proxy endpoint
            api_key: Public key sent as bearer token and ``apikey`` header
            timeout: Request timeout in seconds
        """
        self._url = url
        self._api_key = api_key
        self._timeout = timeout

    @property
    def name(self) -> str:
        return "proxy"

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
            headers["apikey"] = self._api_key
        return headers

    async def request_ids(
        self,
        eligible: Sequence[Exercise],
        preferences: Preferences,
    ) -> List[str]:
        """
        POST the eligible set and preferences to the proxy.

        Raises:
            SuggestionTransportError: Proxy unreachable, timed out or non-2xx
            SuggestionParseError: Body is not a success response and holds no ids
        """
        payload = SuggestionRequest.build(eligible, preferences).to_payload()

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(self._url, json=payload, headers=self._headers())
        except httpx.TimeoutException as e:
            logger.warning(f"Suggestion proxy timeout: {e}")
            raise SuggestionTransportError("Suggestion proxy request timed out") from e
        except httpx.HTTPError as e:
            logger.warning(f"Suggestion proxy unavailable: {e}")
            raise SuggestionTransportError(
                f"Suggestion proxy is not available at {self._url}"
            ) from e

        if not 200 <= response.status_code < 300:
            raise SuggestionTransportError(
                f"Suggestion proxy returned {response.status_code}",
                status_code=response.status_code,
            )

        return self._read_ids(response.text)

    def _read_ids(self, body: str) -> List[str]:
        try:
            data = json.loads(body)
        except json.JSONDecodeError:
            # Plain-text body: treat as raw model output
            return parse_suggestion_text(body).unwrap()

        if isinstance(data, str):
            return parse_suggestion_text(data).unwrap()
        if not isinstance(data, dict):
            raise SuggestionParseError("Suggestion proxy returned an unexpected body shape")

        try:
            parsed = SuggestionResponse.model_validate(data)
        except ValidationError as e:
            raise SuggestionParseError(f"Malformed suggestion proxy response: {e}") from e

        if not parsed.success:
            raise SuggestionParseError("Suggestion proxy reported failure")
        if not parsed.selected_exercise_ids:
            raise SuggestionParseError("Suggestion proxy returned no exercise ids")
        return parsed.selected_exercise_ids
