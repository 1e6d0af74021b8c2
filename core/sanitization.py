"""
Text clean-up for user-supplied strings.

Goals, exercise names and equipment tags are interpolated into generation
prompts, so they are flattened to a single line and length-capped first.
Imports nothing beyond core.constants; models depend on this module.
"""

import re

from core.constants import MAX_SHORT_TEXT_LENGTH


def sanitize_user_input(value: str, max_length: int = MAX_SHORT_TEXT_LENGTH) -> str:
    """
    Flatten a user string to one trimmed line of at most ``max_length`` chars.

    Control characters (including newlines and tabs) become spaces and runs
    of spaces collapse to one before the cut.
    """
    sanitized = re.sub(r"[\n\r\t\x00-\x1f\x7f-\x9f]", " ", value)
    sanitized = re.sub(r" +", " ", sanitized)
    sanitized = sanitized.strip()
    return sanitized[:max_length]


def normalize_equipment_name(value: str) -> str:
    """Lower-case and collapse whitespace so equipment tags compare reliably."""
    return sanitize_user_input(value).lower()
