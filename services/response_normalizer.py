"""
Normalization of raw generator output.

The generator often wraps its JSON in Markdown code fences or adds prose
around it. normalize_generation() strips that formatting, parses the JSON
and checks the top-level shape, returning a tagged result instead of raising
so callers can never act on partially valid data.
"""

import json
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from services.llm.schemas import GeneratedExerciseEntry, GeneratedPlanHeader

logger = logging.getLogger(__name__)

# First fenced block, with or without a language tag
_FENCED_BLOCK_PATTERN = re.compile(
    r"```[ \t]*[A-Za-z0-9_-]*[ \t]*\r?\n?(.*?)```", re.DOTALL
)
# Stray fence markers left when a fence is never closed
_FENCE_MARKER_PATTERN = re.compile(r"```[ \t]*[A-Za-z0-9_-]*[ \t]*\r?\n?")


class NormalizationStatus(str, Enum):
    """Outcome of normalizing a generator payload."""

    OK = "ok"
    PARSE_ERROR = "parse_error"
    SCHEMA_ERROR = "schema_error"


@dataclass(frozen=True)
class NormalizedGeneration:
    """
    Tagged result of normalize_generation().

    ``data`` is set only when status is OK. ``raw_text`` always holds the
    original payload for diagnostics.
    """

    status: NormalizationStatus
    raw_text: str
    data: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    entries: List[GeneratedExerciseEntry] = field(default_factory=list)
    header: GeneratedPlanHeader = field(default_factory=GeneratedPlanHeader)

    @property
    def ok(self) -> bool:
        return self.status == NormalizationStatus.OK


def strip_code_fences(raw_text: str) -> str:
    """
    Remove Markdown code-fence formatting from generator output.

    When a complete fenced block exists, only its content is kept and any
    prose outside the fence is discarded. Otherwise stray fence markers (tagged or
    not) are removed and the remaining text is trimmed.

    Args:
        raw_text: Raw text from the generator

    Returns:
        Text expected to contain only the JSON payload
    """
    match = _FENCED_BLOCK_PATTERN.search(raw_text)
    if match:
        return match.group(1).strip()
    return _FENCE_MARKER_PATTERN.sub("", raw_text).strip()


def normalize_generation(raw_text: str) -> NormalizedGeneration:
    """
    Parse and shape-check a raw generator payload.

    Args:
        raw_text: Raw text exactly as returned by the generation endpoint

    Returns:
        NormalizedGeneration with status OK, PARSE_ERROR or SCHEMA_ERROR
    """
    cleaned = strip_code_fences(raw_text or "")

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.warning(f"Generator returned unparseable JSON: {e}")
        return NormalizedGeneration(
            status=NormalizationStatus.PARSE_ERROR,
            raw_text=raw_text,
            error=f"Invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})",
        )

    if not isinstance(data, dict):
        return NormalizedGeneration(
            status=NormalizationStatus.SCHEMA_ERROR,
            raw_text=raw_text,
            error=f"Expected a JSON object, got {type(data).__name__}",
        )

    exercises = data.get("exercises")
    if not isinstance(exercises, list):
        return NormalizedGeneration(
            status=NormalizationStatus.SCHEMA_ERROR,
            raw_text=raw_text,
            error="Missing 'exercises' array in generated plan",
        )

    return NormalizedGeneration(
        status=NormalizationStatus.OK,
        raw_text=raw_text,
        data=data,
        entries=[GeneratedExerciseEntry.from_payload(item) for item in exercises],
        header=GeneratedPlanHeader.from_payload(data),
    )
