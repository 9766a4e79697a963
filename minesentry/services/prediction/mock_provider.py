"""
Mock Risk Predictor - placeholder until a real imagery model exists.

Returns random numbers in plausible ranges so the dashboard can render
its prediction panel. Nothing here is a real algorithm.
"""

from datetime import datetime, timezone
from typing import Dict, Optional
import asyncio
import logging
import random
import string

from minesentry.models.base import Location
from minesentry.models.hotspot import ConfidenceBreakdown, PredictionFeatures, PredictionResult
from minesentry.services.prediction.base import RiskPredictor

logger = logging.getLogger(__name__)

MOCK_IMAGE = "data:image/png;base64,mock"
_ID_ALPHABET = string.ascii_lowercase + string.digits


class MockRiskPredictor(RiskPredictor):
    """
    Random-value predictor.

    The optional delay mimics inference latency so the UI loading
    state is visible; set it to 0 in tests.
    """

    MODEL_NAME = "mock-random-v1"
    MODEL_VERSION = "1.0.0"

    def __init__(self, delay_seconds: float = 1.0, rng: Optional[random.Random] = None):
        self.delay_seconds = delay_seconds
        self._rng = rng or random.Random()
        logger.info(f"✅ Mock Risk Predictor initialized: {self.MODEL_NAME}")

    def get_model_info(self) -> Dict[str, str]:
        return {
            "name": self.MODEL_NAME,
            "version": self.MODEL_VERSION
        }

    async def predict(self, location: Location, tile_size: int = 256) -> PredictionResult:
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        rng = self._rng
        return PredictionResult(
            id="".join(rng.choices(_ID_ALPHABET, k=9)),
            location=location,
            risk_score=rng.randrange(100),
            confidence_breakdown=ConfidenceBreakdown(
                optical=70 + rng.random() * 20,
                sar=30 - rng.random() * 20,
            ),
            change_mask=MOCK_IMAGE,
            saliency_map=MOCK_IMAGE,
            timestamp=datetime.now(timezone.utc),
            features=PredictionFeatures(
                ndvi_drop=30 + rng.randrange(40),
                sar_backscatter=25 + rng.randrange(35),
                thermal_anomaly=15 + rng.randrange(30),
            ),
        )
