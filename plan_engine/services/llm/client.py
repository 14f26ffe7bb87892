"""
Direct provider transport for exercise ordering.

Calls the language model provider through its OpenAI-compatible chat
completions endpoint. Used by the direct fallback tier when a client-side
credential is configured, and by the proxy endpoint with the server-held key.
"""

import logging
from typing import List, Optional, Sequence

from openai import (
    APIConnectionError,
    APIStatusError,
    APITimeoutError,
    AsyncOpenAI,
    OpenAIError,
)

from plan_engine.application.exceptions import (
    SuggestionParseError,
    SuggestionTransportError,
)
from plan_engine.core.constants import DEFAULT_REST_SECONDS
from plan_engine.domain.models import Exercise, Preferences
from plan_engine.services.llm.parsing import parse_suggestion_text
from plan_engine.services.llm.prompts import (
    EXERCISE_ORDERING_SYSTEM_PROMPT,
    build_exercise_ordering_prompt,
)

logger = logging.getLogger(__name__)

# Raw model output longer than this is cut in debug logs
_LOG_PREVIEW_CHARS = 300


class DirectSuggestionClient:
    """
    Provider-backed suggestion client.

    Makes exactly one completion request per call; retries are disabled on
    the underlying SDK client so the fallback chain owns retry policy.
    """

    DEFAULT_MODEL = "gemini-2.5-flash"
    DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
    TEMPERATURE = 0.7
    MAX_TOKENS = 2048

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        rest_seconds: int = DEFAULT_REST_SECONDS,
        client: Optional[AsyncOpenAI] = None,
    ):
        """
        Initialize the direct client.

        Args:
            api_key: Provider API key
            model: Model name
            base_url: OpenAI-compatible endpoint
            timeout: Request timeout in seconds
            rest_seconds: Rest length quoted in the prompt
            client: Pre-built SDK client (tests)
        """
        self._client = client or AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
        )
        self._model = model
        self._rest_seconds = rest_seconds

    @property
    def name(self) -> str:
        return "direct"

    async def complete(self, prompt: str) -> str:
        """
        Send one prompt and return the raw completion text.

        Raises:
            SuggestionTransportError: Connection failure, timeout or error status
            SuggestionParseError: The completion held no text
        """
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": EXERCISE_ORDERING_SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.TEMPERATURE,
                max_tokens=self.MAX_TOKENS,
            )
        except APITimeoutError as e:
            raise SuggestionTransportError("Provider request timed out") from e
        except APIConnectionError as e:
            raise SuggestionTransportError(f"Provider unreachable: {e}") from e
        except APIStatusError as e:
            raise SuggestionTransportError(
                f"Provider returned {e.status_code}", status_code=e.status_code
            ) from e
        except OpenAIError as e:
            raise SuggestionTransportError(f"Provider call failed: {e}") from e

        if not response.choices:
            raise SuggestionParseError("Provider response has no choices")
        content = response.choices[0].message.content
        if not content:
            raise SuggestionParseError("Empty response from provider")

        logger.debug(f"Provider response: {content[:_LOG_PREVIEW_CHARS]}")
        return content

    async def request_ids(
        self,
        eligible: Sequence[Exercise],
        preferences: Preferences,
    ) -> List[str]:
        prompt = build_exercise_ordering_prompt(eligible, preferences, self._rest_seconds)
        text = await self.complete(prompt)
        return parse_suggestion_text(text).unwrap()
