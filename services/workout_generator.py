"""
AI-powered workout generator service.

This service runs the generation pipeline for a single request, each stage
feeding the next:
1. Candidate Selection - catalog exercises for the user's equipment
2. Prompt Building - constraints plus the candidate list
3. Generation - one call to the external generation endpoint
4. Normalization - strip code fences, parse, shape-check
5. Matching - resolve generated names onto candidates
6. Assembly - final plan with defaults
"""

import asyncio
import logging
from typing import Optional

from application.exceptions import MalformedGeneration, NotConfigured
from application.ports import ExerciseRepository
from core.constants import DEFAULT_CANDIDATE_LIMIT
from models.generation import GeneratedPlan, GenerationRequest
from services.candidate_selector import CandidateSelector
from services.exercise_matcher import match_exercises, require_matches
from services.llm.client import PlanGeneratorClient
from services.llm.prompts import WORKOUT_GENERATION_SYSTEM_PROMPT, build_workout_prompt
from services.plan_assembler import assemble_plan
from services.response_normalizer import normalize_generation
from shared.ai_context import AIRequestContext

logger = logging.getLogger(__name__)


class WorkoutGenerator:
    """
    Service for generating a single workout with AI.

    Holds no per-request state, so one instance can serve concurrent
    requests. The catalog is only read.
    """

    FEATURE_NAME = "workout_generation"

    def __init__(
        self,
        exercise_repo: ExerciseRepository,
        plan_client: PlanGeneratorClient,
        candidate_limit: int = DEFAULT_CANDIDATE_LIMIT,
        environment: str = "production",
    ):
        """
        Initialize the workout generator.

        Args:
            exercise_repo: Repository for exercise catalog access
            plan_client: Client for the generation endpoint
            candidate_limit: Maximum number of candidates offered to the generator
            environment: Deployment environment, attached to AI request context
        """
        self._candidate_selector = CandidateSelector(exercise_repo)
        self._plan_client = plan_client
        self._candidate_limit = candidate_limit
        self._environment = environment

    async def generate(
        self,
        request: GenerationRequest,
        user_id: Optional[str] = None,
    ) -> GeneratedPlan:
        """
        Generate a workout for the given constraints.

        Args:
            request: Validated generation request
            user_id: The requesting user's ID, for request attribution

        Returns:
            GeneratedPlan whose exercises all come from the candidate set

        Raises:
            NotConfigured: If the generation endpoint has no credential
            CatalogEmpty: If the catalog has not been synced
            NoCandidates: If no exercise uses the requested equipment
            UpstreamError: If the generation endpoint rejects the request
            NetworkError: If the generation endpoint cannot be reached
            MalformedGeneration: If the generator's output is not a usable plan
            NoExercisesMatched: If no generated exercise maps to a candidate
        """
        logger.info(
            f"Generating workout for user {user_id}: "
            f"focus={request.focus_area.value}, duration={request.duration_minutes}m, "
            f"equipment={request.equipment}"
        )

        # Step 0: Fail fast without a credential, before any catalog query
        if not self._plan_client.is_configured:
            raise NotConfigured(
                PlanGeneratorClient.NOT_CONFIGURED_MESSAGE,
                setting="openai_api_key",
            )

        # Step 1: Select candidates (blocking DB calls run off the event loop)
        candidates = await asyncio.get_running_loop().run_in_executor(
            None,
            self._candidate_selector.select,
            request.equipment,
            self._candidate_limit,
        )

        # Step 2: Build prompt
        prompt = build_workout_prompt(request, candidates)

        # Step 3: Call the generator
        context = AIRequestContext(
            user_id=user_id or None,
            feature_name=self.FEATURE_NAME,
            environment=self._environment,
        )
        raw_text = await self._plan_client.complete(
            prompt,
            system_prompt=WORKOUT_GENERATION_SYSTEM_PROMPT,
            json_mode=True,
            context=context,
        )

        # Step 4: Normalize
        normalized = normalize_generation(raw_text)
        if not normalized.ok:
            logger.error(
                f"Malformed generation ({normalized.status.value}): {normalized.error}"
            )
            raise MalformedGeneration(
                "The AI generated an invalid workout format. Please try again.",
                raw_text=raw_text,
            )

        # Step 5: Match generated names onto candidates
        match_result = match_exercises(normalized.entries, candidates)
        if not match_result.resolved:
            logger.warning(
                f"No generated exercises matched: suggested={match_result.suggested_names}, "
                f"candidates={match_result.candidate_count}"
            )
        resolved = require_matches(match_result)
        if match_result.is_partial:
            logger.warning(
                f"Partial match: dropped {len(match_result.unmatched_names)} of "
                f"{len(match_result.suggested_names)} exercises: "
                f"{match_result.unmatched_names}"
            )

        # Step 6: Assemble
        plan = assemble_plan(normalized.header, resolved, request.duration_minutes)
        logger.info(f"Generated workout '{plan.name}' with {len(plan.exercises)} exercises")
        return plan
