"""
Main FastAPI application for the Todo API.

This module contains the application factory. Startup is explicit: the
lifespan builds the storage handle, checks the connection, syncs the schema
and only then hands the handle to request handlers via ``app.state``.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo_api.config import Settings, get_settings
from todo_api.core.errors import register_exception_handlers
from todo_api.database import Database, DatabaseUnavailableError
from todo_api.routers import status_router, todos_router, users_router
from todo_api.utils.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Configuration; defaults to the process-wide settings
        database: Storage handle to use; built from ``settings`` at startup
            when omitted

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan context manager for FastAPI application.

        Handles startup and shutdown events.
        """
        setup_logging(settings)
        db = database or Database(settings.SQLALCHEMY_DATABASE_URI, echo=settings.DEBUG)

        logger.info("=" * 60)
        logger.info(f"{settings.PROJECT_NAME} - Application starting up")
        logger.info(f"Environment: {'Development' if settings.DEBUG else 'Production'}")
        logger.info(f"Database: {settings.SQLALCHEMY_DATABASE_URI.split('://')[0]}")
        logger.info("=" * 60)

        try:
            await db.connect()
        except DatabaseUnavailableError:
            logger.critical("Unable to connect to the database, aborting startup", exc_info=True)
            await db.dispose()
            raise
        await db.sync_schema()

        app.state.database = db

        yield

        logger.info("=" * 60)
        logger.info(f"{settings.PROJECT_NAME} - Application shutting down")
        logger.info("=" * 60)
        await db.dispose()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Personal todo lists behind per-user API keys",
        version=settings.VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings

    register_exception_handlers(app)

    # Set up CORS
    if settings.BACKEND_CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(status_router)
    app.include_router(users_router)
    app.include_router(todos_router)

    return app


app = create_app()
