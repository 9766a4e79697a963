"""
Health check endpoints.
Used for monitoring, deployment readiness checks, and basic connectivity tests.
"""

from fastapi import APIRouter, Depends, HTTPException, Request
from datetime import datetime, timezone

from minesentry.dependencies import get_storage
from minesentry.storage.memory import MemoryStorage


router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
async def health_check(request: Request):
    """
    Basic health check endpoint.
    Returns 200 if service is running.
    """
    app_settings = request.app.state.settings
    return {
        "status": "healthy",
        "service": app_settings.APP_NAME,
        "version": app_settings.APP_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@router.get("/storage")
async def storage_health(storage: MemoryStorage = Depends(get_storage)):
    """
    Storage check. The store is in-memory, so this reports record counts
    rather than connectivity.
    """
    try:
        counts = storage.stats()
    except Exception as e:
        raise HTTPException(
            status_code=503,
            detail=f"Storage unavailable: {str(e)}"
        )

    return {
        "status": "healthy",
        "storage": "memory",
        "persistent": False,
        "collections": counts,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
