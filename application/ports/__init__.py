"""
Port interfaces (Protocols) for the workout generation API.

This package defines the interface contracts that the infrastructure
layer must implement. Using Protocols enables:
- Clean separation of concerns
- Easy testing with fake implementations
- Dependency inversion (depend on abstractions, not concretions)
"""

from application.ports.exercise_repository import ExerciseRepository
from application.ports.exercise_source import ExerciseSource

__all__ = [
    "ExerciseRepository",
    "ExerciseSource",
]
