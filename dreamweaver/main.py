"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

from typing import Optional

from fastapi import FastAPI

from dreamweaver.api.v1.router import api_router
from dreamweaver.backends.context import BackendContext
from dreamweaver.core.config import settings
from dreamweaver.core.logging import setup_logging
from dreamweaver.db.session import get_engine
from dreamweaver.db.storage import LocalStorage
from dreamweaver.services.insight_generator import InsightGenerator


def create_app(context: Optional[BackendContext] = None,
               insight_generator: Optional[InsightGenerator] = None, ) -> FastAPI:
    """
    Build the application.

    Args:
        context: Backend context, built from settings when omitted
        insight_generator: Insight generator, built from settings when omitted

    Returns:
        Configured FastAPI application
    """
    setup_logging(settings)

    if context is None:
        context = BackendContext.from_settings(settings, LocalStorage.from_engine(get_engine()))

    application = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description=settings.DESCRIPTION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json")
    application.state.backend_context = context
    application.state.insight_generator = insight_generator or InsightGenerator(settings)

    # Include API router
    application.include_router(api_router, prefix="/api/v1")

    @application.get("/health")
    async def health_check():
        """Health check endpoint for monitoring."""
        return {
            "status": "healthy",
            "service": "dreamweaver-api",
            "version": settings.VERSION,
            "persistence": context.storage.store.available,
        }

    @application.get("/info")
    async def info():
        return {
            "project name": settings.PROJECT_NAME,
            "version": settings.VERSION,
            "authors": settings.AUTHORS,
            "backend": context.config.provider,
        }

    return application


app = create_app()
