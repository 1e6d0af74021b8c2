"""
Exercise form tips.

Reuses the generation-call contract for free text: build a prompt, send it,
return the text. No parsing or matching is involved.
"""

import logging
from typing import Optional

from models.generation import FormTipsRequest, FormTipsResponse
from services.llm.client import PlanGeneratorClient
from services.llm.prompts import build_form_tips_prompt
from shared.ai_context import AIRequestContext

logger = logging.getLogger(__name__)

UNAVAILABLE_MESSAGE = (
    "AI form tips are not available. Add OPENAI_API_KEY to your environment "
    "variables to enable them."
)


class FormTipsService:
    """Generates short form tips for a single exercise."""

    FEATURE_NAME = "form_tips"

    def __init__(self, plan_client: PlanGeneratorClient, environment: str = "production"):
        self._plan_client = plan_client
        self._environment = environment

    async def get_tips(
        self,
        request: FormTipsRequest,
        user_id: Optional[str] = None,
    ) -> FormTipsResponse:
        """
        Get form tips for an exercise.

        When the generation endpoint is not configured this returns an
        explanatory message with ``available=False`` instead of failing.
        Upstream and network errors propagate.
        """
        if not self._plan_client.is_configured:
            return FormTipsResponse(available=False, tips=UNAVAILABLE_MESSAGE)

        prompt = build_form_tips_prompt(
            exercise_name=request.exercise_name,
            body_part=request.body_part,
            target=request.target,
            equipment=request.equipment,
        )
        tips = await self._plan_client.complete(
            prompt,
            context=AIRequestContext(
                user_id=user_id or None,
                feature_name=self.FEATURE_NAME,
                environment=self._environment,
            ),
        )
        logger.info(f"Generated form tips for '{request.exercise_name}'")
        return FormTipsResponse(tips=tips.strip())
