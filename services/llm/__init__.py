"""
LLM integration module.

Provides the generation endpoint client, prompt builders and the shapes of
the generator's untrusted output.
"""

from services.llm.client import PlanGeneratorClient
from services.llm.schemas import GeneratedExerciseEntry, GeneratedPlanHeader

__all__ = [
    "PlanGeneratorClient",
    "GeneratedExerciseEntry",
    "GeneratedPlanHeader",
]
