"""
Input validation for user-submitted payloads.

Each validate_* function is pure: it takes the raw decoded JSON body and
either returns the typed model or raises InputValidationError with
field-level details. Nothing here touches storage.
"""

from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from minesentry.models.alert import AlertCreate
from minesentry.models.report import ReportCreate, VoteUpdate
from minesentry.models.user import UserCreate

ModelT = TypeVar("ModelT", bound=BaseModel)


class InputValidationError(ValueError):
    """Raised when a payload is malformed or out of range."""

    def __init__(self, message: str, details: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or []

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "details": self.details}


def field_details(errors: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Flatten pydantic error dicts into {field, message, type} entries."""
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in errors
    ]


def _validate(model: Type[ModelT], data: Any, message: str) -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise InputValidationError(message, field_details(exc.errors())) from exc


def validate_report_input(data: Any) -> ReportCreate:
    return _validate(ReportCreate, data, "Invalid report data")


def validate_alert_input(data: Any) -> AlertCreate:
    return _validate(AlertCreate, data, "Invalid alert data")


def validate_user_input(data: Any) -> UserCreate:
    return _validate(UserCreate, data, "Invalid user data")


def validate_vote_input(data: Any) -> VoteUpdate:
    return _validate(VoteUpdate, data, "Invalid vote data")
