"""
Health check endpoints.

Provides basic health and status information about the server.
"""

from fastapi import APIRouter, Depends
from datetime import datetime, timezone

from app.config import get_settings
from app.core.user_store import UserStore, get_user_store

router = APIRouter()
settings = get_settings()


@router.get("/health")
async def health_check(store: UserStore = Depends(get_user_store)) -> dict:
    """
    Basic health check endpoint.

    Returns:
        dict: Server status information including version and user count.

    Example response:
        {
            "status": "healthy",
            "app_name": "Todo Service",
            "version": "0.1.0",
            "timestamp": "2024-12-11T23:00:00Z",
            "users": 3
        }
    """
    return {
        "status": "healthy",
        "app_name": settings.APP_NAME,
        "version": settings.VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "users": store.user_count(),
    }


@router.get("/health/ready")
async def readiness_check(store: UserStore = Depends(get_user_store)) -> dict:
    """
    Readiness check for the service.

    The store lives in process memory, so the service is ready as soon
    as the store is reachable.
    """
    return {
        "ready": store is not None,
        "checks": {
            "store": "ok" if store is not None else "missing"
        }
    }
