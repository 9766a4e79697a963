"""
Pydantic models for community reports.
These models handle validation for report submission and responses.
"""

from pydantic import ConfigDict, Field
from datetime import datetime
from typing import Optional
from enum import Enum

from minesentry.models.base import CamelModel, Location


MAX_DESCRIPTION_LENGTH = 500


class ReportCategory(str, Enum):
    """Closed set of observation categories a citizen can pick."""
    WATER_POLLUTION = "Water Pollution"
    DEFORESTATION = "Deforestation"
    LAND_DEGRADATION = "Land Degradation"
    OTHER = "Other"


class ReportCreate(CamelModel):
    """
    Model for creating a new report (incoming POST request).
    Server-owned fields (id, timestamp, userId, validationVotes) are
    not part of this model and are dropped if the client sends them.
    """
    location: Location
    photo_url: Optional[str] = Field(None, description="Uploaded photo URL (optional)")
    description: str = Field(
        ...,
        min_length=1,
        max_length=MAX_DESCRIPTION_LENGTH,
        description="What the reporter observed",
    )
    category: ReportCategory

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "location": {"lat": 5.29, "lng": -1.98},
                "description": "Turbid river water",
                "category": "Water Pollution",
            }
        }
    )


class CommunityReport(CamelModel):
    """
    A stored community report (what the API returns).
    Includes the server-generated id, timestamp and vote counter.
    """
    id: str
    user_id: str
    user_name: str
    location: Location
    photo_url: Optional[str] = None
    description: str
    category: ReportCategory
    timestamp: datetime = Field(..., description="Server-assigned creation time (UTC)")
    validation_votes: int = Field(default=0, description="Peer corroboration counter")


class VoteUpdate(CamelModel):
    """Body of PATCH /api/reports/{id}/vote."""
    votes: int = Field(..., ge=0, strict=True, description="New absolute vote count")
