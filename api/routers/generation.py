"""
AI workout generation router.

This router provides endpoints for AI-powered workout features:
- Generate a single workout from the user's equipment and goals
- Get form tips for an exercise
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_current_user, get_form_tips_service, get_workout_generator
from application.exceptions import WorkoutGenerationError
from models.generation import (
    FormTipsRequest,
    FormTipsResponse,
    GenerateWorkoutResponse,
    GenerationRequest,
)
from services.form_tips import FormTipsService
from services.workout_generator import WorkoutGenerator

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/ai",
    tags=["AI"],
)


@router.post("/generate-workout", response_model=GenerateWorkoutResponse)
async def generate_workout(
    request: GenerationRequest,
    user_id: str = Depends(get_current_user),
    generator: WorkoutGenerator = Depends(get_workout_generator),
):
    """
    Generate a single workout using AI.

    1. **Candidate Selection**: Catalog exercises that use the requested
       equipment (at most 200, alphabetical).

    2. **Generation**: The candidate list and the user's goal, duration and
       focus area are sent to the generation endpoint.

    3. **Matching**: Every generated exercise name is resolved onto a
       candidate; names that match nothing are dropped.

    Args:
        request: Generation parameters including:
            - goal: Free-text training goal
            - equipment: Available equipment tags
            - duration_minutes: Target length (1-240)
            - focus_area: full-body, upper-body, lower-body or core

    Returns:
        The generated workout

    Raises:
        HTTPException 400: If no exercise uses the requested equipment
        HTTPException 422: If no generated exercise matched the catalog
        HTTPException 502: If the generation endpoint failed or returned garbage
        HTTPException 503: If AI or the catalog is not set up
        HTTPException 504: If the generation endpoint could not be reached
    """
    logger.info(
        f"Generate workout request: focus={request.focus_area.value}, "
        f"duration={request.duration_minutes}m"
    )

    try:
        workout = await generator.generate(request, user_id)
        return GenerateWorkoutResponse(workout=workout)

    except WorkoutGenerationError as e:
        logger.error(f"Workout generation failed ({e.code}): {e.message}")
        raise HTTPException(
            status_code=e.status_code,
            detail=e.to_detail(),
        )
    except Exception as e:
        logger.exception(f"Unexpected error during workout generation: {e}")
        raise HTTPException(
            status_code=500,
            detail="An unexpected error occurred during workout generation",
        )


@router.post("/form-tips", response_model=FormTipsResponse)
async def form_tips(
    request: FormTipsRequest,
    user_id: str = Depends(get_current_user),
    service: FormTipsService = Depends(get_form_tips_service),
):
    """
    Get brief form tips for an exercise.

    When AI is not configured the response has ``available: false`` and an
    explanatory message instead of tips.
    """
    try:
        return await service.get_tips(request, user_id)

    except WorkoutGenerationError as e:
        logger.error(f"Form tips failed ({e.code}): {e.message}")
        raise HTTPException(
            status_code=e.status_code,
            detail=e.to_detail(),
        )
    except Exception as e:
        logger.exception(f"Unexpected error generating form tips: {e}")
        raise HTTPException(
            status_code=500,
            detail="An unexpected error occurred while generating form tips",
        )
