"""
Hotspot and prediction models.

Hotspots are a fixed, display-only catalogue and predictions are produced
by a placeholder. Neither is held by the storage engine.
"""

from pydantic import Field, model_validator
from datetime import datetime
from typing import Optional

from minesentry.models.base import CamelModel, Location


class Hotspot(CamelModel):
    """A point of interest with a precomputed risk score, shown on the map."""
    id: str
    name: str
    location: Location
    risk_score: int = Field(..., ge=0, le=100)
    last_updated: datetime
    description: str


class PredictionRequest(CamelModel):
    """
    Body of POST /api/predict. Either explicit coordinates or the name of
    a known hotspot (e.g. "tarkwa") must be given.
    """
    location: Optional[Location] = None
    location_name: Optional[str] = Field(None, description="Hotspot name, used when location is omitted")
    tile_size: int = Field(default=256, ge=1, description="Imagery tile edge in pixels")

    @model_validator(mode="after")
    def require_location_or_name(self) -> "PredictionRequest":
        if self.location is None and not self.location_name:
            raise ValueError("either location or locationName is required")
        return self


class ConfidenceBreakdown(CamelModel):
    optical: float
    sar: float


class PredictionFeatures(CamelModel):
    ndvi_drop: int
    sar_backscatter: int
    thermal_anomaly: int


class PredictionResult(CamelModel):
    """
    Shape of a risk prediction as the dashboard expects it.
    Values are randomized placeholders, not model output.
    """
    id: str
    location: Location
    risk_score: int
    confidence_breakdown: ConfidenceBreakdown
    change_mask: str
    saliency_map: str
    timestamp: datetime
    features: PredictionFeatures
