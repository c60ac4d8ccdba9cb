"""
Status router.

This module contains endpoints for API status and health checks.
"""

from fastapi import APIRouter, Request

router = APIRouter(tags=["status"])


@router.get("/")
async def root(request: Request):
    """Root endpoint returning API information."""
    settings = request.app.state.settings
    return {
        "message": f"Welcome to {settings.PROJECT_NAME}",
        "version": settings.VERSION,
        "docs": "/docs",
    }


@router.get("/health")
async def health_check(request: Request):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "database": request.app.state.database.backend,
    }
