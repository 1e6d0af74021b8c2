"""
Router package for the workout generation API.

This package contains all API routers organized by domain:
- health: Health check endpoints
- generation: AI workout generation and form tips
- exercises: Exercise catalog sync
"""

from api.routers.health import router as health_router
from api.routers.generation import router as generation_router
from api.routers.exercises import router as exercises_router

__all__ = [
    "health_router",
    "generation_router",
    "exercises_router",
]
