"""
Shared constants.

This module has no dependencies on models or services to avoid circular imports.
"""

# Rest inserted between consecutive exercises (seconds)
DEFAULT_REST_SECONDS = 30

# Fewer validated AI suggestions than this fails the tier
MIN_SUGGESTED_EXERCISES = 3

# How far an AI-ordered plan may run past the target before it is cut
SUGGESTION_OVERSHOOT_SECONDS = 60

# Local packing cycles through the shuffled list at most this many times
MAX_PACKING_CYCLES = 2

# Maximum length of a free-text preference value placed in a prompt
MAX_PROMPT_FIELD_LENGTH = 100
