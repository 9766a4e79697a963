"""
Risk Predictor Registry.

Selects the predictor named in settings. Unknown names fall back to the
mock so the predict endpoint always answers.
"""

from minesentry.core.settings import Settings
from minesentry.services.prediction.base import RiskPredictor
from minesentry.services.prediction.mock_provider import MockRiskPredictor
import logging

logger = logging.getLogger(__name__)


def build_risk_predictor(app_settings: Settings) -> RiskPredictor:
    provider = app_settings.PREDICTION_PROVIDER.lower()

    if provider != "mock":
        logger.warning(f"⚠️ Unknown prediction provider '{provider}', falling back to mock")

    return MockRiskPredictor(delay_seconds=app_settings.PREDICTION_DELAY_SECONDS)
