"""Models package for the workout generation API."""

from models.exercise import ExerciseRecord, SyncResult, SyncStatus
from models.generation import (
    FocusArea,
    FormTipsRequest,
    FormTipsResponse,
    GeneratedPlan,
    GenerateWorkoutResponse,
    GenerationRequest,
    MatchDiagnostics,
    MatchMethod,
    ResolvedExerciseEntry,
)

__all__ = [
    "ExerciseRecord",
    "SyncResult",
    "SyncStatus",
    "FocusArea",
    "FormTipsRequest",
    "FormTipsResponse",
    "GeneratedPlan",
    "GenerateWorkoutResponse",
    "GenerationRequest",
    "MatchDiagnostics",
    "MatchMethod",
    "ResolvedExerciseEntry",
]
