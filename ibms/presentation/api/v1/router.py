"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from ibms.presentation.api.v1.endpoints.health import router as health_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
