"""
Exercises router for the exercise catalog.

This router provides endpoints for:
- Checking whether the catalog has been synced (auto-syncing when empty)
- Manually triggering a catalog sync from ExerciseDB
"""

import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from api.deps import get_catalog_sync_service, get_current_user
from application.exceptions import WorkoutGenerationError
from services.catalog_sync import CatalogSyncService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/exercises",
    tags=["Exercises"],
)


# =============================================================================
# Response Models
# =============================================================================


class CheckSyncResponse(BaseModel):
    """Response model for the catalog sync status."""
    synced: bool = Field(..., description="Whether the catalog holds any exercises")
    count: int = Field(..., description="Number of exercises in the catalog")
    message: Optional[str] = Field(None, description="Set when an auto-sync ran")


class SyncResponse(BaseModel):
    """Response model for a manual catalog sync."""
    success: bool = True
    count: int = Field(..., description="Number of exercises written")
    message: str


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/check-sync", response_model=CheckSyncResponse)
async def check_sync(
    service: CatalogSyncService = Depends(get_catalog_sync_service),
):
    """
    Check if the exercise catalog is synced.

    An empty catalog is synced from ExerciseDB before responding. If that
    sync fails the error detail carries ``synced: false``.
    """
    status = await asyncio.get_running_loop().run_in_executor(None, service.check_sync)
    if status.synced:
        return CheckSyncResponse(synced=True, count=status.count)

    logger.info("Exercise catalog is empty, running auto-sync")
    try:
        result = await service.sync()
    except WorkoutGenerationError as e:
        logger.error(f"Auto-sync failed ({e.code}): {e.message}")
        raise HTTPException(
            status_code=e.status_code,
            detail={**e.to_detail(), "synced": False},
        )
    except Exception as e:
        logger.exception(f"Unexpected error during auto-sync: {e}")
        raise HTTPException(
            status_code=500,
            detail={"synced": False, "message": "Failed to sync exercises"},
        )

    return CheckSyncResponse(synced=True, count=result.count, message=result.message)


@router.post("/sync", response_model=SyncResponse)
async def sync_exercises(
    user_id: str = Depends(get_current_user),
    service: CatalogSyncService = Depends(get_catalog_sync_service),
):
    """
    Manually sync the exercise catalog from ExerciseDB.

    Existing exercises (same ExerciseDB id) are left untouched.

    Raises:
        HTTPException 502: If ExerciseDB returned an error
        HTTPException 503: If the ExerciseDB key is not configured
        HTTPException 504: If ExerciseDB could not be reached
    """
    logger.info(f"Catalog sync requested by user {user_id}")

    try:
        result = await service.sync()
    except WorkoutGenerationError as e:
        logger.error(f"Catalog sync failed ({e.code}): {e.message}")
        raise HTTPException(
            status_code=e.status_code,
            detail=e.to_detail(),
        )
    except Exception as e:
        logger.exception(f"Unexpected error during catalog sync: {e}")
        raise HTTPException(
            status_code=500,
            detail="An unexpected error occurred during catalog sync",
        )

    return SyncResponse(count=result.count, message=result.message)
