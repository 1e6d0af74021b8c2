"""
AI Request Context for tracking metadata in AI API calls.

Attach an AIRequestContext to every generation call so requests can be
attributed to a user and a feature in the provider's dashboard.

Usage:
    from shared.ai_context import AIRequestContext

    context = AIRequestContext(
        user_id="user_123",
        feature_name="workout_generation",
        environment="production",
    )

    raw = await plan_client.complete(prompt, context=context)
"""

import re
from dataclasses import dataclass, field
from typing import Dict, Optional


VALID_ENVIRONMENTS = {"production", "staging", "development", "test"}

_HEADER_PREFIX = "X-Workout-Gen-"
_VALID_HEADER_NAME_PATTERN = re.compile(r"^[A-Za-z0-9\-]+$")


def _sanitize_header_value(value: str) -> str:
    """Keep only printable ASCII so values cannot inject extra headers."""
    return "".join(char for char in value if char.isprintable() and ord(char) < 128)


@dataclass
class AIRequestContext:
    """
    Context to attach to AI API calls for tracking and observability.

    Args:
        user_id: The user making the request (for cost attribution)
        feature_name: The feature triggering the AI call (for cost breakdown)
        request_id: Optional request identifier (for log correlation)
        environment: Deployment environment
        extra: Additional metadata key-value pairs
    """

    user_id: Optional[str] = None
    feature_name: Optional[str] = None
    request_id: Optional[str] = None
    environment: str = "production"
    extra: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        """Validate context after initialization."""
        if self.environment not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"Invalid environment '{self.environment}'. "
                f"Must be one of: {', '.join(sorted(VALID_ENVIRONMENTS))}"
            )

        if self.user_id is not None and not self.user_id:
            raise ValueError("user_id must be a non-empty string if provided")

        if self.feature_name is not None and not self.feature_name:
            raise ValueError("feature_name must be a non-empty string if provided")

    def to_dict(self) -> Dict[str, str]:
        """Convert context to a flat dictionary."""
        result = {"environment": self.environment}
        if self.user_id:
            result["user_id"] = self.user_id
        if self.feature_name:
            result["feature_name"] = self.feature_name
        if self.request_id:
            result["request_id"] = self.request_id
        if self.extra:
            result.update(self.extra)
        return result

    def to_tracking_headers(self) -> Dict[str, str]:
        """
        Convert context to HTTP headers sent with the generation request.

        Keys become ``X-Workout-Gen-<Key>``; keys that are not valid header
        names are dropped and values are sanitized.
        """
        headers: Dict[str, str] = {}
        for key, value in self.to_dict().items():
            name = key.replace("_", "-").title()
            if not _VALID_HEADER_NAME_PATTERN.match(name):
                continue
            headers[f"{_HEADER_PREFIX}{name}"] = _sanitize_header_value(str(value))
        return headers
