"""Root router aggregating the health and user endpoints."""

from fastapi import APIRouter

from record_service.presentation.api.endpoints.health import router as health_router
from record_service.presentation.api.endpoints.users import router as users_router

router = APIRouter()
router.include_router(health_router)
router.include_router(users_router)
