"""
Hotspot and prediction endpoints.

POST /api/predict is a PLACEHOLDER: it returns random numbers from the
mock predictor and must not be read as a real risk assessment.
"""

from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
import logging

from minesentry.dependencies import get_predictor
from minesentry.models.base import Location
from minesentry.models.hotspot import Hotspot, PredictionRequest, PredictionResult
from minesentry.services.hotspot_service import get_hotspot_by_name, get_hotspots
from minesentry.services.prediction.base import RiskPredictor

logger = logging.getLogger(__name__)

# Used when a named location is not in the hotspot catalogue.
DEFAULT_ANALYSIS_LOCATION = Location(lat=6.0, lng=-1.5)

router = APIRouter(prefix="/api", tags=["Hotspots"])


@router.get("/hotspots", response_model=List[Hotspot])
async def list_hotspots():
    return get_hotspots()


@router.post("/predict", response_model=PredictionResult)
async def predict(body: PredictionRequest, predictor: RiskPredictor = Depends(get_predictor)):
    location = body.location
    if location is None:
        hotspot = get_hotspot_by_name(body.location_name)
        location = hotspot.location if hotspot else DEFAULT_ANALYSIS_LOCATION

    try:
        result = await predictor.predict(location, body.tile_size)
        logger.info(
            f"Prediction served by {predictor.get_model_info()['name']} "
            f"for ({location.lat}, {location.lng}): risk={result.risk_score}"
        )
        return result
    except Exception as e:
        logger.error(f"❌ POST /api/predict failed: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="ML prediction failed",
        )
