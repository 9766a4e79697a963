"""
Hotspot catalogue - fixed mining-risk points shown on the dashboard map.

Scores are precomputed and static. The catalogue is read-only and lives
outside the storage engine.
"""

from datetime import datetime, timezone
from typing import List, Optional

from minesentry.models.base import Location
from minesentry.models.hotspot import Hotspot

_LOADED_AT = datetime.now(timezone.utc)

_HOTSPOTS = [
    Hotspot(
        id="1",
        name="Tarkwa",
        location=Location(lat=5.2922, lng=-1.9833),
        risk_score=87,
        last_updated=_LOADED_AT,
        description="High mining activity detected with significant vegetation loss",
    ),
    Hotspot(
        id="2",
        name="Obuasi",
        location=Location(lat=6.2019, lng=-1.6586),
        risk_score=65,
        last_updated=_LOADED_AT,
        description="Moderate risk with water pollution indicators",
    ),
    Hotspot(
        id="3",
        name="Damang",
        location=Location(lat=6.0123, lng=-1.8625),
        risk_score=45,
        last_updated=_LOADED_AT,
        description="Low to moderate activity with forest degradation",
    ),
]


def get_hotspots() -> List[Hotspot]:
    return [hotspot.model_copy(deep=True) for hotspot in _HOTSPOTS]


def get_hotspot_by_name(name: str) -> Optional[Hotspot]:
    """Case-insensitive lookup, used to resolve named locations like 'tarkwa'."""
    wanted = name.strip().lower()
    for hotspot in _HOTSPOTS:
        if hotspot.name.lower() == wanted:
            return hotspot.model_copy(deep=True)
    return None
