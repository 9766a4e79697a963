"""
FastAPI dependencies.

The storage engine and predictor are built once by the app factory and
kept on app.state; routes receive them through Depends() instead of
importing module-level singletons.
"""

from typing import Any, Dict, Tuple

from fastapi import Request

from minesentry.services.prediction.base import RiskPredictor
from minesentry.storage.memory import MemoryStorage

# Fallback identity for unauthenticated requests. This is a permissive
# default for the demo dashboard, not a security boundary.
ANONYMOUS_USER_ID = "anonymous"
ANONYMOUS_USER_NAME = "Anonymous User"


def get_storage(request: Request) -> MemoryStorage:
    return request.app.state.storage


def get_predictor(request: Request) -> RiskPredictor:
    return request.app.state.predictor


def resolve_identity(payload: Dict[str, Any], request: Request) -> Tuple[str, str]:
    """
    Work out who is submitting.

    Order: body fields (userId / userName), then X-User-Id / X-User-Name
    headers, then the anonymous fallback.
    """
    user_id = payload.get("userId") or request.headers.get("X-User-Id") or ANONYMOUS_USER_ID
    user_name = payload.get("userName") or request.headers.get("X-User-Name") or ANONYMOUS_USER_NAME
    return str(user_id), str(user_name)
