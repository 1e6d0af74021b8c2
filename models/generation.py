"""
Request/response models for AI workout generation.

These models define the API contract for generating a single workout from
the user's constraints and the exercise catalog.
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from core.constants import (
    MAX_DURATION_MINUTES,
    MAX_EQUIPMENT_COUNT,
    MAX_GOAL_LENGTH,
)
from core.sanitization import normalize_equipment_name, sanitize_user_input


class FocusArea(str, Enum):
    """Body region the workout should emphasize."""

    FULL_BODY = "full-body"
    UPPER_BODY = "upper-body"
    LOWER_BODY = "lower-body"
    CORE = "core"


class MatchMethod(str, Enum):
    """How a generated exercise name was resolved to a catalog record."""

    EXACT = "exact"
    CONTAINMENT = "containment"


class GenerationRequest(BaseModel):
    """Request model for generating a workout."""

    goal: str = Field(min_length=1, description="Free-text training goal")
    equipment: List[str] = Field(
        min_length=1,
        description="Available equipment tags (e.g. 'dumbbell', 'body weight')",
    )
    duration_minutes: int = Field(
        ge=1, le=MAX_DURATION_MINUTES, description="Target workout length in minutes"
    )
    focus_area: FocusArea = Field(description="Body region to emphasize")

    @field_validator("goal", mode="before")
    @classmethod
    def validate_goal(cls, v: Any) -> Any:
        """Strip control characters from the goal before it reaches the prompt."""
        if isinstance(v, str):
            return sanitize_user_input(v, max_length=MAX_GOAL_LENGTH)
        return v

    @field_validator("equipment", mode="before")
    @classmethod
    def validate_equipment(cls, v: Any) -> Any:
        """
        Normalize equipment tags.

        - Rejects more than MAX_EQUIPMENT_COUNT entries
        - Lower-cases and trims each entry
        - Drops empty and duplicate entries, keeping first-seen order
        """
        if not isinstance(v, list):
            return v

        if len(v) > MAX_EQUIPMENT_COUNT:
            raise ValueError(
                f"Too many equipment entries. Maximum allowed: {MAX_EQUIPMENT_COUNT}"
            )

        normalized: List[str] = []
        for item in v:
            if not isinstance(item, str):
                continue
            clean = normalize_equipment_name(item)
            if clean and clean not in normalized:
                normalized.append(clean)
        return normalized


class ResolvedExerciseEntry(BaseModel):
    """A generated exercise mapped onto a real catalog record."""

    exercise_id: str = Field(description="Catalog id of the matched exercise")
    name: str = Field(description="Canonical catalog name")
    sets: int = Field(ge=1)
    reps: str
    rest_time: int = Field(ge=1, description="Rest between sets in seconds")
    notes: Optional[str] = None
    match_method: MatchMethod


class GeneratedPlan(BaseModel):
    """A generated workout whose exercises all exist in the catalog."""

    name: str
    description: str
    estimated_duration: int = Field(ge=1, description="Estimated minutes")
    exercises: List[ResolvedExerciseEntry] = Field(
        min_length=1, description="Exercises in the generator's order"
    )


class MatchDiagnostics(BaseModel):
    """Debugging detail attached when no generated exercise could be matched."""

    suggested_names: List[str] = Field(default_factory=list)
    unmatched_names: List[str] = Field(default_factory=list)
    candidate_count: int = Field(ge=0)


class GenerateWorkoutResponse(BaseModel):
    """Response envelope for POST /ai/generate-workout."""

    success: bool = True
    workout: GeneratedPlan


class FormTipsRequest(BaseModel):
    """Request model for exercise form tips."""

    exercise_name: str = Field(min_length=1)
    body_part: Optional[str] = None
    target: Optional[str] = None
    equipment: Optional[str] = None

    @field_validator("exercise_name", "body_part", "target", "equipment", mode="before")
    @classmethod
    def sanitize_text(cls, v: Any) -> Any:
        if isinstance(v, str):
            return sanitize_user_input(v)
        return v


class FormTipsResponse(BaseModel):
    """Response envelope for POST /ai/form-tips."""

    success: bool = True
    available: bool = True
    tips: str
