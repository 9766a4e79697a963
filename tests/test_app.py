from fastapi.testclient import TestClient

from minesentry.core.settings import Settings
from minesentry.main import create_app
from minesentry.storage.memory import MemoryStorage


def test_root(client):
    body = client.get("/").json()
    assert body["status"] == "running"
    assert body["service"] == "MineSentry API"


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


def test_storage_health_reports_counts(client, report_payload):
    client.post("/api/reports", json=report_payload)
    body = client.get("/health/storage").json()
    assert body["storage"] == "memory"
    assert body["persistent"] is False
    assert body["collections"]["reports"] == 1


def test_unknown_route_uses_error_shape(client):
    resp = client.get("/api/nothing-here")
    assert resp.status_code == 404
    assert "error" in resp.json()


def test_demo_report_seeded_on_startup():
    storage = MemoryStorage()
    app = create_app(Settings(SEED_DEMO_DATA=True, PREDICTION_DELAY_SECONDS=0, _env_file=None), storage=storage)

    with TestClient(app) as client:
        reports = client.get("/api/reports").json()

    assert len(reports) == 1
    assert reports[0]["userName"] == "Demo Reporter"


def test_seeding_skipped_when_reports_exist(report_payload):
    storage = MemoryStorage()
    app = create_app(Settings(SEED_DEMO_DATA=True, PREDICTION_DELAY_SECONDS=0, _env_file=None), storage=storage)

    with TestClient(app) as client:
        client.post("/api/reports", json=report_payload)

    # A second startup over the same store must not add another demo report.
    with TestClient(create_app(Settings(SEED_DEMO_DATA=True, _env_file=None), storage=storage)):
        pass

    assert storage.stats()["reports"] == 2


def test_each_app_gets_its_own_store(report_payload):
    settings = Settings(PREDICTION_DELAY_SECONDS=0, _env_file=None)
    first = TestClient(create_app(settings))
    second = TestClient(create_app(settings))

    first.post("/api/reports", json=report_payload)
    assert second.get("/api/reports").json() == []


def test_module_entry_point_runs_uvicorn(monkeypatch):
    from minesentry import __main__ as entry

    calls = []
    monkeypatch.setattr(entry.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
    monkeypatch.setattr(entry.settings, "PORT", 9123)

    entry.main()

    assert len(calls) == 1
    args, kwargs = calls[0]
    assert args == ("minesentry.main:app",)
    assert kwargs["port"] == 9123
    assert kwargs["host"] == entry.settings.HOST
