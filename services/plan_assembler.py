"""
Assembly of the final generated plan.

Pure function, no side effects and no failure modes of its own: every
failure is raised upstream before assembly runs.
"""

import math
from typing import Any, List

from core.constants import DEFAULT_PLAN_DESCRIPTION, DEFAULT_PLAN_NAME
from models.generation import GeneratedPlan, ResolvedExerciseEntry
from services.llm.schemas import GeneratedPlanHeader


def _text_or_default(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def _duration_or_default(value: Any, requested_minutes: int) -> int:
    if isinstance(value, bool):
        return requested_minutes
    if isinstance(value, (int, float)) and math.isfinite(value) and value >= 1:
        return int(value)
    if isinstance(value, str) and value.strip().isdigit() and int(value) >= 1:
        return int(value)
    return requested_minutes


def assemble_plan(
    header: GeneratedPlanHeader,
    exercises: List[ResolvedExerciseEntry],
    requested_duration_minutes: int,
) -> GeneratedPlan:
    """
    Combine resolved exercises with the plan-level fields.

    Args:
        header: Plan name/description/duration as emitted by the generator
        exercises: Resolved entries in generator order (non-empty)
        requested_duration_minutes: Duration from the original request,
            used when the generator omitted one

    Returns:
        The final GeneratedPlan
    """
    return GeneratedPlan(
        name=_text_or_default(header.name, DEFAULT_PLAN_NAME),
        description=_text_or_default(header.description, DEFAULT_PLAN_DESCRIPTION),
        estimated_duration=_duration_or_default(
            header.estimated_duration, requested_duration_minutes
        ),
        exercises=list(exercises),
    )
