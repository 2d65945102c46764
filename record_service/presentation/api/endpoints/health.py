"""Liveness probe; touches no database."""

from fastapi import APIRouter, Request

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(request: Request) -> dict:
    """Returns the current application health status."""
    settings = request.app.state.settings
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
    }
