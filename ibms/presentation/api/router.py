"""Top-level API router — versioned sub-routers first, then the demo backend catch-all."""

from fastapi import APIRouter

from ibms.presentation.api.demo_backend import router as demo_backend_router
from ibms.presentation.api.v1.router import router as v1_router

router = APIRouter(prefix="/api")
router.include_router(v1_router)
router.include_router(demo_backend_router)
