"""
Health check routes
Endpoints for monitoring application health and status
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from controle_juridico import __version__
from .dependencies import get_connection_status


router = APIRouter(
    tags=["health"],
    responses={
        500: {"description": "Internal server error"},
        503: {"description": "Service unavailable"},
    },
)


@router.get("/")
async def root():
    """
    Root endpoint - Basic service information

    Returns:
        dict: Service name, status and version
    """
    return {"service": "Controle Jurídico", "status": "running", "version": __version__}


@router.get("/health")
async def health_check(mongodb_connected: bool = Depends(get_connection_status)):
    """
    Detailed health check endpoint

    Returns:
        dict: Health status including the MongoDB connection
    """
    return {
        "status": "healthy" if mongodb_connected else "unhealthy",
        "mongodb": "connected" if mongodb_connected else "disconnected",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
