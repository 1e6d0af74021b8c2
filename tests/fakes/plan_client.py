"""
Fake generation endpoint clients for testing.

These fakes return canned text without calling any external API and
record the prompts they receive.
"""

import json
from typing import Any, Dict, List, Optional

from shared.ai_context import AIRequestContext


def plan_payload(
    names: List[str],
    workout_name: str = "Dumbbell Strength",
    estimated_duration: Optional[int] = 45,
) -> Dict[str, Any]:
    """Build a generator payload listing the given exercise names."""
    payload: Dict[str, Any] = {
        "workoutName": workout_name,
        "description": "A focused strength session",
        "exercises": [
            {"name": name, "sets": 4, "reps": "8-10", "restTime": 90, "notes": "Controlled tempo"}
            for name in names
        ],
    }
    if estimated_duration is not None:
        payload["estimatedDuration"] = estimated_duration
    return payload


class FakePlanGeneratorClient:
    """
    Deterministic fake for PlanGeneratorClient.

    Returns the configured raw text (or JSON-encoded payload) for every call.
    """

    def __init__(
        self,
        response: Any = None,
        configured: bool = True,
    ):
        """
        Initialize the fake client.

        Args:
            response: Raw text, or a dict that is JSON-encoded per call
            configured: Value reported by is_configured
        """
        self._response = response if response is not None else plan_payload(["Dumbbell Row"])
        self._configured = configured
        self.calls: List[Dict[str, Any]] = []

    # -------------------------------------------------------------------------
    # Test Helpers
    # -------------------------------------------------------------------------

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def last_prompt(self) -> Optional[str]:
        return self.calls[-1]["prompt"] if self.calls else None

    def set_response(self, response: Any) -> None:
        self._response = response

    # -------------------------------------------------------------------------
    # PlanGeneratorClient Interface
    # -------------------------------------------------------------------------

    @property
    def is_configured(self) -> bool:
        return self._configured

    async def complete(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        json_mode: bool = False,
        context: Optional[AIRequestContext] = None,
    ) -> str:
        self.calls.append({
            "prompt": prompt,
            "system_prompt": system_prompt,
            "json_mode": json_mode,
            "context": context,
        })
        if isinstance(self._response, str):
            return self._response
        return json.dumps(self._response)


class FailingPlanGeneratorClient(FakePlanGeneratorClient):
    """Fake client whose every call raises the given error."""

    def __init__(self, error: Exception):
        super().__init__()
        self._error = error

    async def complete(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        json_mode: bool = False,
        context: Optional[AIRequestContext] = None,
    ) -> str:
        self.calls.append({"prompt": prompt, "context": context})
        raise self._error
