"""
Placeholder risk prediction.

Kept apart from the storage engine: predictions are never stored and no
other module depends on their values.
"""

from minesentry.services.prediction.base import RiskPredictor
from minesentry.services.prediction.mock_provider import MockRiskPredictor
from minesentry.services.prediction.registry import build_risk_predictor

__all__ = [
    "RiskPredictor",
    "MockRiskPredictor",
    "build_risk_predictor",
]
