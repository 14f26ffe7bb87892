"""
Two-pass parser for free-text AI responses.

Pass one looks for the first well-formed JSON array and keeps its string
elements. Pass two, used only if pass one finds nothing, collects every
UUID-shaped substring. The result type carries a ``SuggestionParseError``
instead of raising it.
"""

import json
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from plan_engine.application.exceptions import SuggestionParseError

UUID_PATTERN = re.compile(
    r"[a-f0-9]{8}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{12}",
    re.IGNORECASE,
)

_decoder = json.JSONDecoder()


class ParseSource(str, Enum):
    JSON_ARRAY = "json_array"
    ID_PATTERN = "id_pattern"


@dataclass
class ParseResult:
    """Ids recovered from a response, or the reason none were."""

    ids: List[str] = field(default_factory=list)
    source: Optional[ParseSource] = None
    error: Optional[SuggestionParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> List[str]:
        """Return the ids or raise the parse error."""
        if self.error is not None:
            raise self.error
        return self.ids


def first_json_array(text: str) -> Optional[list]:
    """Return the first substring of ``text`` that decodes as a JSON array."""
    start = text.find("[")
    while start != -1:
        try:
            value, _ = _decoder.raw_decode(text, start)
        except json.JSONDecodeError:
            value = None
        if isinstance(value, list):
            return value
        start = text.find("[", start + 1)
    return None


def extract_uuids(text: str) -> List[str]:
    """Every UUID-shaped substring, first occurrence order, without repeats."""
    return list(dict.fromkeys(UUID_PATTERN.findall(text)))


def parse_suggestion_text(text: Optional[str]) -> ParseResult:
    """
    Recover an ordered id list from raw model output.

    Args:
        text: Raw response text, possibly wrapped in prose or code fences

    Returns:
        ParseResult with ids and the pass that produced them, or an error
    """
    if not text or not text.strip():
        return ParseResult(error=SuggestionParseError("Empty suggestion response"))

    array = first_json_array(text)
    if array is not None:
        ids = [item for item in array if isinstance(item, str)]
        if ids:
            return ParseResult(ids=ids, source=ParseSource.JSON_ARRAY)

    ids = extract_uuids(text)
    if ids:
        return ParseResult(ids=ids, source=ParseSource.ID_PATTERN)

    return ParseResult(
        error=SuggestionParseError("No exercise ids found in suggestion response")
    )
