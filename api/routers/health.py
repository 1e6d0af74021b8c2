"""
Liveness endpoint.

Also reports whether the generation credential is present, so a deploy
missing OPENAI_API_KEY shows up before the first workout request fails.
"""

from fastapi import APIRouter, Request

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health(request: Request):
    settings = request.app.state.settings
    return {
        "status": "ok",
        "service": "workout-generator",
        "generation_configured": settings.generation_configured,
    }
