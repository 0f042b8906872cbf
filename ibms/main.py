"""FastAPI application factory — the demo backend server."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ibms.config import get_settings
from ibms.infrastructure.dependencies import get_mock_backend
from ibms.infrastructure.logging.log_config import setup_logging
from ibms.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: configure logging and seed the default tenant."""
    settings = get_settings()
    setup_logging()
    get_mock_backend().store_for(settings.default_tenant)
    logger.info("Demo backend ready (default tenant '%s')", settings.default_tenant)
    yield


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "ibms.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
