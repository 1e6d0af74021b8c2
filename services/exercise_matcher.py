"""
Exercise matching for generated workouts.

Resolves the generator's free-text exercise names against the candidate list
that was offered in the prompt. Two fixed strategies run in order, first hit
wins:

1. Exact match - case-insensitive name equality, first candidate in order
2. Containment match - either name is a case-insensitive substring of the
   other, first candidate in order (no scoring, no longest-match preference)

Names that match neither are dropped from the plan and reported as
unmatched. Matching only ever resolves into the candidate list, never the
full catalog, so a plan cannot reference equipment the user does not have.

Known limitation: containment is order-sensitive. A generated "Curl" resolves
to whichever of "Bicep Curl" / "Leg Curl" comes first in the candidate list.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple

from application.exceptions import NoExercisesMatched
from core.constants import DEFAULT_REPS, DEFAULT_REST_SECONDS, DEFAULT_SETS
from models.exercise import ExerciseRecord
from models.generation import MatchDiagnostics, MatchMethod, ResolvedExerciseEntry
from services.llm.schemas import GeneratedExerciseEntry

logger = logging.getLogger(__name__)


@dataclass
class MatchResult:
    """Outcome of matching every generated entry against the candidates."""

    resolved: List[ResolvedExerciseEntry] = field(default_factory=list)
    suggested_names: List[str] = field(default_factory=list)
    unmatched_names: List[str] = field(default_factory=list)
    candidate_count: int = 0

    @property
    def is_partial(self) -> bool:
        """True when some, but not all, entries resolved."""
        return bool(self.resolved) and bool(self.unmatched_names)

    def diagnostics(self) -> MatchDiagnostics:
        return MatchDiagnostics(
            suggested_names=list(self.suggested_names),
            unmatched_names=list(self.unmatched_names),
            candidate_count=self.candidate_count,
        )


def find_candidate(
    name: str,
    candidates: Sequence[ExerciseRecord],
) -> Optional[Tuple[ExerciseRecord, MatchMethod]]:
    """
    Find the candidate a generated name refers to.

    Args:
        name: Exercise name as emitted by the generator
        candidates: Candidate exercises in prompt order

    Returns:
        (candidate, method) for the first hit, or None when nothing matches
    """
    needle = name.strip().lower()
    # An empty string is a substring of every name
    if not needle:
        return None

    for candidate in candidates:
        if candidate.name.lower() == needle:
            return candidate, MatchMethod.EXACT

    for candidate in candidates:
        candidate_name = candidate.name.lower()
        if needle in candidate_name or candidate_name in needle:
            return candidate, MatchMethod.CONTAINMENT

    return None


def _positive_int(value: Any, default: int) -> int:
    """Coerce a generator value to a positive int, else use the default."""
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return default
    try:
        number = int(float(value.strip())) if isinstance(value, str) else int(value)
    except (ValueError, OverflowError):
        return default
    return number if number > 0 else default


def _reps_text(value: Any) -> str:
    """Render reps as a string; numbers are accepted as well as ranges."""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return DEFAULT_REPS
    if isinstance(value, float):
        if not math.isfinite(value) or value <= 0:
            return DEFAULT_REPS
        if value.is_integer():
            value = int(value)
    elif not isinstance(value, str) and value <= 0:
        return DEFAULT_REPS
    text = str(value).strip()
    return text or DEFAULT_REPS


def resolve_entry(
    entry: GeneratedExerciseEntry,
    candidate: ExerciseRecord,
    method: MatchMethod,
) -> ResolvedExerciseEntry:
    """
    Build a resolved entry, applying field defaults.

    The canonical name always comes from the catalog. Defaults do not depend
    on how the name was matched.
    """
    return ResolvedExerciseEntry(
        exercise_id=candidate.id,
        name=candidate.name,
        sets=_positive_int(entry.sets, DEFAULT_SETS),
        reps=_reps_text(entry.reps),
        rest_time=_positive_int(entry.rest_time, DEFAULT_REST_SECONDS),
        notes=entry.notes if isinstance(entry.notes, str) else None,
        match_method=method,
    )


def match_exercises(
    entries: Sequence[GeneratedExerciseEntry],
    candidates: Sequence[ExerciseRecord],
) -> MatchResult:
    """
    Match every generated entry, keeping generator order.

    Args:
        entries: Generated entries in emission order
        candidates: The candidate list that was given to the generator

    Returns:
        MatchResult with resolved entries and unmatched names
    """
    result = MatchResult(candidate_count=len(candidates))

    for entry in entries:
        result.suggested_names.append(entry.name)
        hit = find_candidate(entry.name, candidates)
        if hit is None:
            result.unmatched_names.append(entry.name)
            continue

        candidate, method = hit
        if method == MatchMethod.CONTAINMENT:
            logger.debug(f"Matched '{entry.name}' to '{candidate.name}' by containment")
        result.resolved.append(resolve_entry(entry, candidate, method))

    return result


def require_matches(result: MatchResult) -> List[ResolvedExerciseEntry]:
    """
    Enforce the match-yield policy.

    Returns:
        The resolved entries when at least one entry resolved

    Raises:
        NoExercisesMatched: When nothing resolved, with diagnostics
    """
    if not result.resolved:
        raise NoExercisesMatched(result.diagnostics())
    return result.resolved
