"""
Fake implementations for testing.

This package provides in-memory fake implementations of repository and
client interfaces for fast, isolated testing without network or database
dependencies.
"""

from tests.fakes.exercise_repository import FakeExerciseRepository
from tests.fakes.exercise_source import FakeExerciseSource
from tests.fakes.plan_client import FailingPlanGeneratorClient, FakePlanGeneratorClient

__all__ = [
    "FakeExerciseRepository",
    "FakeExerciseSource",
    "FakePlanGeneratorClient",
    "FailingPlanGeneratorClient",
]
