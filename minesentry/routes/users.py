"""
User registration endpoints.

Username uniqueness is enforced here through the storage engine's
atomic create_user_if_absent, so concurrent sign-ups with the same name
cannot both succeed.
"""

from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, HTTPException, status
import logging

from minesentry.dependencies import get_storage
from minesentry.models.user import UserPublic
from minesentry.models.validation import InputValidationError, validate_user_input
from minesentry.storage.memory import MemoryStorage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.post("", response_model=UserPublic, status_code=status.HTTP_201_CREATED)
async def register_user(
    payload: Dict[str, Any] = Body(...),
    storage: MemoryStorage = Depends(get_storage),
):
    """
    Register a new user.

    Returns:
        The created user without its password
    """
    try:
        user_data = validate_user_input(payload)
        user = storage.create_user_if_absent(user_data)
    except (HTTPException, InputValidationError):
        raise
    except Exception as e:
        logger.error(f"❌ POST /api/users - Registration failed: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to register user",
        )

    if user is None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already exists")

    logger.info(f"User registered: {user.id}")
    return UserPublic(id=user.id, username=user.username)


@router.get("/{user_id}", response_model=UserPublic)
async def get_user(user_id: str, storage: MemoryStorage = Depends(get_storage)):
    user = storage.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserPublic(id=user.id, username=user.username)
