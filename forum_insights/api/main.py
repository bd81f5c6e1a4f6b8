"""
FastAPI application for the Forum Insights service.

This module initializes and configures the FastAPI application that serves
the insights API endpoints.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from forum_insights.config.settings import settings
from forum_insights.api.endpoints import insights
from forum_insights.utils.db_health import check_db_connection
from forum_insights.utils.db_session import get_async_engine
from forum_insights.utils.logging_utils import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager for startup and shutdown events.

    Configures logging on startup and disposes of the database engine on
    shutdown.
    """
    setup_logging()
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Reporting timezone: {settings.REPORTING_TIMEZONE}")

    if await check_db_connection():
        logger.info("Database connection verified")
    else:
        logger.warning("Database not reachable at startup; insights requests will fail until it is")

    yield

    logger.info("Shutting down application")
    await get_async_engine().dispose()


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="""Engagement insights for forum members.

        Summarizes a user's own topics: totals, average comments and likes per
        topic, per-topic engagement, and daily activity over the last 14 days.""",
        debug=settings.DEBUG,
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_tags=[
            {
                "name": "insights",
                "description": "Owner-scoped engagement analytics"
            },
            {
                "name": "health",
                "description": "Health check and monitoring"
            }
        ]
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS if not settings.DEBUG else ["*"],
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(
        insights.router,
        prefix="/api/v1/insights",
        tags=["insights"]
    )

    @app.get("/health", tags=["health"], summary="Health Check")
    async def health_check():
        """
        Health check endpoint.

        Returns:
            dict: Service status, version, timestamp and database reachability.
        """
        database_ok = await check_db_connection()
        return {
            "status": "healthy" if database_ok else "degraded",
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "database": "ok" if database_ok else "unreachable",
            "reporting_timezone": settings.REPORTING_TIMEZONE,
        }

    return app


# Create the application instance
app = create_app()


def run() -> None:
    """Serve the application with uvicorn using the configured host and port."""
    uvicorn.run(
        "forum_insights.api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
