"""
Shapes of the generator's (untrusted) output.

The generator is free to ignore the requested schema, so nothing here is
validated strictly: values are kept as emitted and only coerced when the
matcher applies defaults.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class GeneratedExerciseEntry:
    """One exercise exactly as the generator emitted it."""

    name: str
    sets: Any = None
    reps: Any = None
    rest_time: Any = None
    notes: Any = None

    @classmethod
    def from_payload(cls, item: Any) -> "GeneratedExerciseEntry":
        """
        Build an entry from one element of the generator's exercises array.

        Non-object elements and missing or non-string names become an entry
        with an empty name, which never matches a candidate.
        """
        if not isinstance(item, dict):
            return cls(name="")

        name = item.get("name")
        rest_time = item.get("restTime", item.get("rest_time"))
        return cls(
            name=name.strip() if isinstance(name, str) else "",
            sets=item.get("sets"),
            reps=item.get("reps"),
            rest_time=rest_time,
            notes=item.get("notes"),
        )


@dataclass(frozen=True)
class GeneratedPlanHeader:
    """Plan-level fields from the generator's payload, unvalidated."""

    name: Optional[Any] = None
    description: Optional[Any] = None
    estimated_duration: Optional[Any] = None

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "GeneratedPlanHeader":
        return cls(
            name=data.get("workoutName", data.get("name")),
            description=data.get("description"),
            estimated_duration=data.get("estimatedDuration"),
        )
