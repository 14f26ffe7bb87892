"""
Input sanitization utilities.

Shared sanitization functions to prevent prompt injection attacks.
This module has no dependencies on models or services to avoid circular imports.
"""

import re

from plan_engine.core.constants import MAX_PROMPT_FIELD_LENGTH


def sanitize_user_input(value: str, max_length: int = MAX_PROMPT_FIELD_LENGTH) -> str:
    """
    Sanitize user input by removing control characters and limiting length.

    Args:
        value: Raw user-provided string
        max_length: Maximum allowed length (default: MAX_PROMPT_FIELD_LENGTH)

    Returns:
        Sanitized string safe for prompt inclusion
    """
    # Remove newlines, carriage returns, tabs, and other control characters
    sanitized = re.sub(r"[\n\r\t\x00-\x1f\x7f-\x9f]", " ", value)
    # Collapse multiple spaces into one
    sanitized = re.sub(r" +", " ", sanitized)
    return sanitized.strip()[:max_length]
