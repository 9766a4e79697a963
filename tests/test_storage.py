import threading
import uuid
from datetime import datetime, timedelta, timezone

import pytest

from minesentry.models.alert import AlertCreate
from minesentry.models.report import ReportCategory, ReportCreate
from minesentry.models.user import UserCreate
from minesentry.storage.memory import MemoryStorage


@pytest.fixture
def report_data(report_payload):
    return ReportCreate.model_validate(report_payload)


@pytest.fixture
def alert_data(alert_payload):
    return AlertCreate.model_validate(alert_payload)


class TestUsers:
    def test_create_and_lookup(self, storage):
        user = storage.create_user(UserCreate(username="ama", password="pw"))
        uuid.UUID(user.id)
        assert storage.get_user(user.id) == user
        assert storage.get_user_by_username("ama") == user

    def test_missing_user_is_none(self, storage):
        assert storage.get_user("nope") is None
        assert storage.get_user_by_username("nobody") is None

    def test_create_user_does_not_enforce_uniqueness(self, storage):
        first = storage.create_user(UserCreate(username="ama", password="a"))
        second = storage.create_user(UserCreate(username="ama", password="b"))
        assert first.id != second.id

    def test_create_user_if_absent(self, storage):
        user = storage.create_user_if_absent(UserCreate(username="ama", password="a"))
        assert user is not None
        assert storage.create_user_if_absent(UserCreate(username="ama", password="b")) is None
        assert storage.stats()["users"] == 1

    def test_concurrent_registration_creates_one_user(self, storage):
        results = []
        barrier = threading.Barrier(8)

        def register():
            barrier.wait()
            results.append(storage.create_user_if_absent(UserCreate(username="kofi", password="pw")))

        threads = [threading.Thread(target=register) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len([r for r in results if r is not None]) == 1
        assert storage.stats()["users"] == 1


class TestReports:
    def test_create_report_scenario(self, storage, report_data):
        before = datetime.now(timezone.utc)
        report = storage.create_report(report_data, "u1", "Ama")

        uuid.UUID(report.id)
        assert report.user_id == "u1"
        assert report.user_name == "Ama"
        assert report.location.lat == 5.29
        assert report.location.lng == -1.98
        assert report.description == "Turbid river water"
        assert report.category is ReportCategory.WATER_POLLUTION
        assert report.validation_votes == 0
        assert report.timestamp >= before
        assert storage.get_reports()[0].id == report.id

    def test_ids_are_unique(self, storage, report_data):
        ids = {storage.create_report(report_data, "u1", "Ama").id for _ in range(50)}
        assert len(ids) == 50

    def test_reports_newest_first(self, storage, report_data, monkeypatch):
        base = datetime(2026, 1, 1, tzinfo=timezone.utc)
        offsets = iter([5, 1, 9, 3])
        monkeypatch.setattr(
            "minesentry.storage.memory.utc_now",
            lambda: base + timedelta(minutes=next(offsets)),
        )
        for _ in range(4):
            storage.create_report(report_data, "u1", "Ama")

        timestamps = [r.timestamp for r in storage.get_reports()]
        assert timestamps == sorted(timestamps, reverse=True)
        assert all(a >= b for a, b in zip(timestamps, timestamps[1:]))

    def test_equal_timestamps_keep_insertion_order(self, storage, report_data, monkeypatch):
        fixed = datetime(2026, 1, 1, tzinfo=timezone.utc)
        monkeypatch.setattr("minesentry.storage.memory.utc_now", lambda: fixed)
        created = [storage.create_report(report_data, "u1", "Ama").id for _ in range(3)]
        assert [r.id for r in storage.get_reports()] == created

    def test_get_missing_report_is_none(self, storage):
        assert storage.get_report("missing") is None

    def test_update_votes(self, storage, report_data):
        report = storage.create_report(report_data, "u1", "Ama")
        storage.update_report_votes(report.id, 7)
        assert storage.get_report(report.id).validation_votes == 7

    def test_update_votes_on_missing_report_is_noop(self, storage, report_data):
        report = storage.create_report(report_data, "u1", "Ama")
        before = storage.get_reports()
        storage.update_report_votes("missing", 3)
        assert storage.get_reports() == before
        assert storage.get_report(report.id).validation_votes == 0

    def test_returned_records_are_copies(self, storage, report_data):
        report = storage.create_report(report_data, "u1", "Ama")
        report.validation_votes = 100
        report.location.lat = 0.0
        stored = storage.get_report(report.id)
        assert stored.validation_votes == 0
        assert stored.location.lat == 5.29


class TestAlerts:
    def test_create_and_list_by_user(self, storage, alert_data):
        mine = storage.create_alert(alert_data, "u1")
        storage.create_alert(alert_data, "u2")

        alerts = storage.get_alerts("u1")
        assert [a.id for a in alerts] == [mine.id]
        assert alerts[0] == mine

    def test_alerts_for_unknown_user_empty(self, storage):
        assert storage.get_alerts("ghost") == []

    def test_delete_alert(self, storage, alert_data):
        alert = storage.create_alert(alert_data, "u1")
        keep = storage.create_alert(alert_data, "u1")
        storage.delete_alert(alert.id)
        assert [a.id for a in storage.get_alerts("u1")] == [keep.id]

    def test_delete_missing_alert_is_noop(self, storage, alert_data):
        storage.create_alert(alert_data, "u1")
        storage.delete_alert("missing")
        assert len(storage.get_alerts("u1")) == 1


def test_stats_counts_each_collection(storage, report_data, alert_data):
    storage.create_user(UserCreate(username="ama", password="pw"))
    storage.create_report(report_data, "u1", "Ama")
    storage.create_alert(alert_data, "u1")
    storage.create_alert(alert_data, "u1")
    assert storage.stats() == {"users": 1, "reports": 1, "alerts": 2}


def test_independent_instances_do_not_share_state(report_data):
    first, second = MemoryStorage(), MemoryStorage()
    first.create_report(report_data, "u1", "Ama")
    assert second.get_reports() == []
