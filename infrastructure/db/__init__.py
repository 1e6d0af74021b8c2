"""
Database infrastructure package.

Supabase implementations of the repository ports.
"""

from infrastructure.db.exercise_repository import SupabaseExerciseRepository

__all__ = [
    "SupabaseExerciseRepository",
]
