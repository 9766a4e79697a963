"""
Pydantic models for alert subscriptions.
"""

from pydantic import ConfigDict, Field, field_validator
from typing import List, Tuple
from enum import Enum

from minesentry.models.base import CamelModel, Coordinate


class AlertFrequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"


class DeliveryChannel(str, Enum):
    IN_APP = "in-app"
    EMAIL = "email"
    SMS = "sms"


class Region(CamelModel):
    """A named area, given as an ordered list of (lat, lng) vertices."""
    name: str = Field(..., min_length=1, description="Display name of the watched region")
    coordinates: List[Tuple[Coordinate, Coordinate]] = Field(..., description="Ordered (lat, lng) pairs, may be empty")


class AlertCreate(CamelModel):
    """Model for creating an alert subscription (incoming POST request)."""
    region: Region
    frequency: AlertFrequency
    delivery: List[DeliveryChannel]

    @field_validator("delivery")
    @classmethod
    def dedupe_delivery(cls, value: List[DeliveryChannel]) -> List[DeliveryChannel]:
        # Repeated channels collapse to one, first occurrence wins the position.
        return list(dict.fromkeys(value))

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "region": {"name": "Tarkwa", "coordinates": [[5.29, -1.98], [5.31, -1.95]]},
                "frequency": "daily",
                "delivery": ["in-app", "email"],
            }
        }
    )


class AlertSubscription(CamelModel):
    """A stored alert subscription."""
    id: str
    user_id: str
    region: Region
    frequency: AlertFrequency
    delivery: List[DeliveryChannel]
