"""
Risk Predictor Base Interface.

Defines the contract for anything that can score a map location.
Only a placeholder implementation exists; there is no trained model.
"""

from abc import ABC, abstractmethod
from typing import Dict

from minesentry.models.base import Location
from minesentry.models.hotspot import PredictionResult


class RiskPredictor(ABC):
    """
    Abstract base class for risk predictors.

    Implementations must return a complete PredictionResult and must not
    read or write the storage engine.
    """

    @abstractmethod
    def get_model_info(self) -> Dict[str, str]:
        """
        Get model information (name, version).

        Returns:
            Dict with 'name' and 'version' keys
        """
        pass

    @abstractmethod
    async def predict(self, location: Location, tile_size: int = 256) -> PredictionResult:
        """
        Score a location.

        Args:
            location: Centre of the imagery tile
            tile_size: Tile edge in pixels

        Returns:
            PredictionResult for that location
        """
        pass
