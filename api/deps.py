"""
FastAPI Dependency Providers for the workout generation API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) or configured services rather than building
them inside route handlers.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository and service providers create new instances per-request
- Auth providers extract the user from headers

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_exercise_repo] = lambda: FakeExerciseRepository()
    app.dependency_overrides[get_plan_client] = lambda: FakePlanGeneratorClient(...)
"""

import hashlib
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client, create_client

from application.ports import ExerciseRepository, ExerciseSource
from backend.settings import Settings, get_settings as _get_settings
from infrastructure.db import SupabaseExerciseRepository
from infrastructure.exercisedb_client import ExerciseDBClient
from services.catalog_sync import CatalogSyncService
from services.form_tips import FormTipsService
from services.llm.client import PlanGeneratorClient
from services.workout_generator import WorkoutGenerator


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_exercise_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ExerciseRepository:
    """
    Get ExerciseRepository implementation.

    Returns a SupabaseExerciseRepository instance with injected client.
    The return type is the Protocol to enable easy faking.
    """
    return SupabaseExerciseRepository(client)


def get_exercise_source(
    settings: Settings = Depends(get_settings),
) -> ExerciseSource:
    """Get the ExerciseDB client used by the catalog sync."""
    return ExerciseDBClient(
        api_key=settings.exercisedb_api_key,
        base_url=settings.exercisedb_base_url,
    )


# =============================================================================
# Service Providers
# =============================================================================


def get_plan_client(
    settings: Settings = Depends(get_settings),
) -> PlanGeneratorClient:
    """
    Get the generation endpoint client.

    The credential is injected here; a missing credential yields a client
    whose calls raise NotConfigured.
    """
    return PlanGeneratorClient(
        api_key=settings.openai_api_key,
        base_url=settings.generation_base_url,
        model=settings.generation_model,
        timeout_seconds=settings.generation_timeout_seconds,
        max_attempts=settings.generation_max_attempts,
    )


def get_workout_generator(
    settings: Settings = Depends(get_settings),
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
    plan_client: PlanGeneratorClient = Depends(get_plan_client),
) -> WorkoutGenerator:
    """Create a WorkoutGenerator wired to the catalog and generation client."""
    return WorkoutGenerator(
        exercise_repo=exercise_repo,
        plan_client=plan_client,
        candidate_limit=settings.candidate_limit,
        environment=settings.environment,
    )


def get_form_tips_service(
    settings: Settings = Depends(get_settings),
    plan_client: PlanGeneratorClient = Depends(get_plan_client),
) -> FormTipsService:
    """Create a FormTipsService sharing the generation client."""
    return FormTipsService(plan_client=plan_client, environment=settings.environment)


def get_catalog_sync_service(
    settings: Settings = Depends(get_settings),
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
    source: ExerciseSource = Depends(get_exercise_source),
) -> CatalogSyncService:
    """Create a CatalogSyncService for the configured catalog and source."""
    return CatalogSyncService(
        exercise_repo=exercise_repo,
        source=source,
        batch_size=settings.sync_batch_size,
        page_size=settings.sync_page_size,
    )


# =============================================================================
# Authentication Providers
# =============================================================================


async def get_current_user(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Get the current authenticated user ID.

    Session handling lives in the web layer, which forwards the user's
    token as a Bearer header. The returned identifier is a truncated SHA-256
    digest of the token, so the token itself never reaches logs or the
    generation tracking headers.

    Raises:
        HTTPException: 401 if the header is missing or malformed
        RuntimeError: If the stub is used in production
    """
    if settings.is_production:
        raise RuntimeError(
            "Authentication stub cannot be used in production. "
            "Configure token validation before deploying."
        )

    if not authorization:
        raise HTTPException(
            status_code=401,
            detail="Missing authorization header",
        )

    if not authorization.startswith("Bearer "):
        raise HTTPException(
            status_code=401,
            detail="Invalid authorization header format",
        )

    token = authorization[7:].strip()
    if not token:
        raise HTTPException(
            status_code=401,
            detail="Invalid token",
        )

    return "user-" + hashlib.sha256(token.encode("utf-8")).hexdigest()[:16]


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_exercise_repo",
    "get_exercise_source",
    # Services
    "get_plan_client",
    "get_workout_generator",
    "get_form_tips_service",
    "get_catalog_sync_service",
    # Authentication
    "get_current_user",
]
