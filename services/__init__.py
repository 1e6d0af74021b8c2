"""
Services package for the workout generation API.

Contains business logic services for:
- Workout generation (candidate selection, prompt, generation, matching)
- Catalog sync from ExerciseDB
- Exercise form tips
"""

from services.candidate_selector import CandidateSelector
from services.catalog_sync import CatalogSyncService
from services.exercise_matcher import MatchResult, find_candidate, match_exercises
from services.form_tips import FormTipsService
from services.plan_assembler import assemble_plan
from services.response_normalizer import (
    NormalizationStatus,
    NormalizedGeneration,
    normalize_generation,
)
from services.workout_generator import WorkoutGenerator

__all__ = [
    # Generation pipeline
    "CandidateSelector",
    "MatchResult",
    "NormalizationStatus",
    "NormalizedGeneration",
    "WorkoutGenerator",
    "assemble_plan",
    "find_candidate",
    "match_exercises",
    "normalize_generation",
    # Catalog
    "CatalogSyncService",
    # Form tips
    "FormTipsService",
]
