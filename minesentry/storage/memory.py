"""
In-memory storage engine - the single source of truth for users,
community reports and alert subscriptions.

DESIGN NOTE:
- Records live for the lifetime of the process only (no persistence)
- Ids are generated here, never taken from clients
- Missing records are reported as None, never as exceptions
- Callers get copies; stored records change only through these methods
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional
import threading
import uuid
import logging

from minesentry.models.alert import AlertCreate, AlertSubscription
from minesentry.models.report import CommunityReport, ReportCreate
from minesentry.models.user import User, UserCreate

logger = logging.getLogger(__name__)


def new_id() -> str:
    """128-bit random identifier. Collisions are not checked."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MemoryStorage:
    """
    Dictionary-backed repository keyed by generated ids.

    FastAPI may run handlers on a thread pool, so every operation holds
    a re-entrant lock for its whole duration.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._users: Dict[str, User] = {}
        self._reports: Dict[str, CommunityReport] = {}
        self._alerts: Dict[str, AlertSubscription] = {}

    # ---------- Users ----------

    def get_user(self, user_id: str) -> Optional[User]:
        with self._lock:
            user = self._users.get(user_id)
            return user.model_copy(deep=True) if user else None

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            user = self._find_user_by_username(username)
            return user.model_copy(deep=True) if user else None

    def create_user(self, user_data: UserCreate) -> User:
        """
        Store a new user. Does NOT check username uniqueness; use
        create_user_if_absent when the caller needs that guarantee.
        """
        with self._lock:
            user = User(id=new_id(), username=user_data.username, password=user_data.password)
            self._users[user.id] = user
            logger.debug(f"User created: {user.id}")
            return user.model_copy(deep=True)

    def create_user_if_absent(self, user_data: UserCreate) -> Optional[User]:
        """
        Atomic lookup-then-create on username.

        Returns:
            The new user, or None if the username is already taken
        """
        with self._lock:
            if self._find_user_by_username(user_data.username) is not None:
                return None
            return self.create_user(user_data)

    def _find_user_by_username(self, username: str) -> Optional[User]:
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    # ---------- Reports ----------

    def get_reports(self) -> List[CommunityReport]:
        """
        All reports, most recent first.
        Reports with equal timestamps keep their insertion order.
        """
        with self._lock:
            ordered = sorted(self._reports.values(), key=lambda r: r.timestamp, reverse=True)
            return [report.model_copy(deep=True) for report in ordered]

    def get_report(self, report_id: str) -> Optional[CommunityReport]:
        with self._lock:
            report = self._reports.get(report_id)
            return report.model_copy(deep=True) if report else None

    def create_report(self, report_data: ReportCreate, user_id: str, user_name: str) -> CommunityReport:
        with self._lock:
            report = CommunityReport(
                id=new_id(),
                user_id=user_id,
                user_name=user_name,
                location=report_data.location.model_copy(),
                photo_url=report_data.photo_url,
                description=report_data.description,
                category=report_data.category,
                timestamp=utc_now(),
                validation_votes=0,
            )
            self._reports[report.id] = report
            return report.model_copy(deep=True)

    def update_report_votes(self, report_id: str, votes: int) -> None:
        """Overwrite the vote counter. Unknown ids are silently ignored."""
        with self._lock:
            report = self._reports.get(report_id)
            if report is None:
                logger.debug(f"Vote update for unknown report ignored: {report_id}")
                return
            self._reports[report_id] = report.model_copy(update={"validation_votes": votes})

    # ---------- Alerts ----------

    def get_alerts(self, user_id: str) -> List[AlertSubscription]:
        with self._lock:
            return [
                alert.model_copy(deep=True)
                for alert in self._alerts.values()
                if alert.user_id == user_id
            ]

    def create_alert(self, alert_data: AlertCreate, user_id: str) -> AlertSubscription:
        with self._lock:
            alert = AlertSubscription(
                id=new_id(),
                user_id=user_id,
                region=alert_data.region.model_copy(deep=True),
                frequency=alert_data.frequency,
                delivery=list(alert_data.delivery),
            )
            self._alerts[alert.id] = alert
            return alert.model_copy(deep=True)

    def delete_alert(self, alert_id: str) -> None:
        """Remove an alert. Unknown ids are silently ignored."""
        with self._lock:
            self._alerts.pop(alert_id, None)

    # ---------- Diagnostics ----------

    def stats(self) -> Dict[str, int]:
        """Record count per collection."""
        with self._lock:
            return {
                "users": len(self._users),
                "reports": len(self._reports),
                "alerts": len(self._alerts),
            }
