"""
Alert subscription endpoints.
"""

from typing import Any, Dict, List
from fastapi import APIRouter, Body, Depends, HTTPException, Request, status
import logging

from minesentry.dependencies import get_storage, resolve_identity
from minesentry.models.alert import AlertSubscription
from minesentry.models.validation import InputValidationError, validate_alert_input
from minesentry.storage.memory import MemoryStorage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/alerts", tags=["Alerts"])


@router.get("/{user_id}", response_model=List[AlertSubscription])
async def list_alerts(user_id: str, storage: MemoryStorage = Depends(get_storage)):
    """Alert subscriptions belonging to one user (no particular order)."""
    try:
        return storage.get_alerts(user_id)
    except Exception as e:
        logger.error(f"❌ GET /api/alerts/{user_id} failed: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch alerts",
        )


@router.post("", response_model=AlertSubscription, status_code=status.HTTP_201_CREATED)
async def create_alert(
    request: Request,
    payload: Dict[str, Any] = Body(...),
    storage: MemoryStorage = Depends(get_storage),
):
    try:
        alert_data = validate_alert_input(payload)
        user_id, _ = resolve_identity(payload, request)

        alert = storage.create_alert(alert_data, user_id)
        logger.info(f"✅ Alert created: {alert.id} for region '{alert.region.name}' ({user_id})")
        return alert

    except (HTTPException, InputValidationError):
        raise
    except Exception as e:
        logger.error(f"❌ POST /api/alerts - Alert creation failed: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create alert",
        )


@router.delete("/{alert_id}")
async def delete_alert(alert_id: str, storage: MemoryStorage = Depends(get_storage)):
    """Delete an alert subscription. Deleting an unknown id still succeeds."""
    try:
        storage.delete_alert(alert_id)
        return {"success": True}
    except Exception as e:
        logger.error(f"❌ DELETE /api/alerts/{alert_id} failed: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete alert",
        )
