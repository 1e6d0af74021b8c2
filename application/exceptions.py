"""
Application-layer exceptions.

Every stage of workout generation either returns its success value or
raises one of the errors below. Routers translate them into HTTP responses
using ``status_code`` and ``to_detail()``.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from models.generation import MatchDiagnostics


class WorkoutGenerationError(Exception):
    """Base class for all workout generation failures."""

    status_code: int = 500
    code: str = "GENERATION_ERROR"
    retryable: bool = False

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_detail(self) -> Dict[str, Any]:
        """Build the error payload returned to API callers."""
        return {"code": self.code, "message": self.message}


class NotConfigured(WorkoutGenerationError):
    """A required credential is missing. Never retried automatically."""

    status_code = 503
    code = "NOT_CONFIGURED"

    def __init__(self, message: str, setting: Optional[str] = None):
        super().__init__(message)
        self.setting = setting


class CatalogEmpty(WorkoutGenerationError):
    """The exercise catalog holds no records at all."""

    status_code = 503
    code = "CATALOG_EMPTY"

    def __init__(
        self,
        message: str = (
            "Exercise database is empty. Sync the exercise catalog before "
            "generating workouts."
        ),
    ):
        super().__init__(message)


class NoCandidates(WorkoutGenerationError):
    """The catalog has records, but none use the requested equipment."""

    status_code = 400
    code = "NO_CANDIDATES"

    def __init__(self, equipment: List[str]):
        super().__init__(
            f"No exercises found for your equipment ({', '.join(equipment)})."
        )
        self.equipment = list(equipment)


class UpstreamError(WorkoutGenerationError):
    """An external service answered with a non-success response."""

    status_code = 502
    code = "UPSTREAM_ERROR"

    # Max characters of the upstream body kept on the error
    BODY_EXCERPT_LENGTH = 500

    def __init__(
        self,
        message: str,
        upstream_status: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message)
        self.upstream_status = upstream_status
        self.body_excerpt = (body or "")[: self.BODY_EXCERPT_LENGTH]

    @property
    def retryable(self) -> bool:  # type: ignore[override]
        """Rate limits and server errors are worth retrying."""
        if self.upstream_status is None:
            return False
        return self.upstream_status == 429 or self.upstream_status >= 500

    def to_detail(self) -> Dict[str, Any]:
        detail = super().to_detail()
        if self.upstream_status is not None:
            detail["upstream_status"] = self.upstream_status
        return detail


class NetworkError(WorkoutGenerationError):
    """Transport failure (connection refused, DNS, timeout)."""

    status_code = 504
    code = "NETWORK_ERROR"
    retryable = True


class MalformedGeneration(WorkoutGenerationError):
    """The generator's output could not be parsed or has the wrong shape."""

    status_code = 502
    code = "MALFORMED_GENERATION"

    def __init__(self, message: str, raw_text: str = ""):
        super().__init__(message)
        self.raw_text = raw_text


class NoExercisesMatched(WorkoutGenerationError):
    """None of the generated exercise names resolved to a candidate."""

    status_code = 422
    code = "NO_EXERCISES_MATCHED"

    def __init__(self, diagnostics: "MatchDiagnostics"):
        super().__init__(
            "The AI couldn't match any exercises to the catalog. "
            "Please try again or adjust your equipment."
        )
        self.diagnostics = diagnostics

    def to_detail(self) -> Dict[str, Any]:
        detail = super().to_detail()
        detail["diagnostics"] = self.diagnostics.model_dump()
        return detail

