import pytest
from fastapi.testclient import TestClient

from minesentry.core.settings import Settings
from minesentry.main import create_app
from minesentry.storage.memory import MemoryStorage


@pytest.fixture
def test_settings():
    return Settings(PREDICTION_DELAY_SECONDS=0.0, SEED_DEMO_DATA=False, _env_file=None)


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def app(test_settings, storage):
    return create_app(app_settings=test_settings, storage=storage)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def report_payload():
    return {
        "location": {"lat": 5.29, "lng": -1.98},
        "description": "Turbid river water",
        "category": "Water Pollution",
    }


@pytest.fixture
def alert_payload():
    return {
        "region": {"name": "Tarkwa", "coordinates": [[5.29, -1.98], [5.31, -1.95]]},
        "frequency": "daily",
        "delivery": ["in-app", "email"],
    }
