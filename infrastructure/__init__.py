"""
Infrastructure layer package.

This package contains concrete implementations of the port interfaces.
"""

from infrastructure.db import SupabaseExerciseRepository
from infrastructure.exercisedb_client import ExerciseDBClient

__all__ = [
    "SupabaseExerciseRepository",
    "ExerciseDBClient",
]
