"""
API package for the workout generation service.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_exercise_repo,
    get_exercise_source,
    get_plan_client,
    get_workout_generator,
    get_form_tips_service,
    get_catalog_sync_service,
    get_current_user,
)

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
