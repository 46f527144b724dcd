from __future__ import annotations

import logging
from collections import defaultdict
from datetime import datetime, timezone
from typing import Any, Iterator, Optional, Sequence

from ..common.datetime_utils import parse_instant
from ..transport.base import api_call, json_body, unwrap_data
from ..transport.connection import ApiConnection
from .model import TimeInterval, TrackedUser
from .repository import TokenProvider

logger = logging.getLogger(__name__)


class TimeDoctorTrackingProvider:
    """TrackingProvider backed by the Time Doctor REST API (api2, v1.0)."""

    def __init__(self, conn: ApiConnection, tokens: TokenProvider):
        self._conn = conn
        self._tokens = tokens

    def _get(self, path: str, params: dict[str, Any], what: str) -> Any:
        headers = {"Authorization": f"JWT {self._tokens.get_token()}"}
        with api_call(self._conn, what) as session:
            response = session.get(
                self._conn.url(path),
                params=params,
                headers=headers,
                timeout=self._conn.config.timeout_seconds,
            )
            return unwrap_data(json_body(response), what)

    def list_users(self, company_id: str) -> Sequence[TrackedUser]:
        rows = self._get("users", {"company": company_id}, "Time Doctor users") or []
        users: list[TrackedUser] = []
        for row in rows:
            user = _to_user(row)
            if user is None:
                logger.warning("Skipping Time Doctor user without id/email: %r", row)
                continue
            users.append(user)
        return users

    def list_worklogs(
        self,
        company_id: str,
        user_ids: Sequence[str],
        since: datetime,
    ) -> dict[str, list[TimeInterval]]:
        if not user_ids:
            return {}
        params = {
            "company": company_id,
            "user": ",".join(str(u) for u in user_ids),
            "from": since.astimezone(timezone.utc).isoformat().replace("+00:00", "Z"),
        }
        data = self._get("activity/worklog", params, "Time Doctor worklogs") or []

        # Entries carry their own userId; the outer list order is not a contract.
        by_user: dict[str, list[TimeInterval]] = defaultdict(list)
        for entry in _flatten(data):
            user_id = entry.get("userId")
            if user_id is None:
                logger.warning("Dropping worklog entry without userId: %r", entry)
                continue
            interval = _to_interval(entry)
            if interval is not None:
                by_user[str(user_id)].append(interval)
        return dict(by_user)


def _flatten(data: Any) -> Iterator[dict]:
    if isinstance(data, dict):
        yield data
    elif isinstance(data, list):
        for item in data:
            yield from _flatten(item)


def _to_user(row: Any) -> Optional[TrackedUser]:
    if not isinstance(row, dict) or row.get("id") is None or not row.get("email"):
        return None
    last_track = row.get("lastTrackGlobal") or {}
    active_at = last_track.get("activeAt") if isinstance(last_track, dict) else None
    return TrackedUser(
        user_id=str(row["id"]),
        email=str(row["email"]),
        last_active_at=parse_instant(active_at) if active_at else None,
        name=row.get("name"),
    )


def _to_interval(entry: dict) -> Optional[TimeInterval]:
    start = entry.get("start")
    if not start:
        logger.warning("Dropping worklog entry without start: %r", entry)
        return None
    duration = max(int(entry.get("time") or 0), 0)
    return TimeInterval(start=parse_instant(start), duration_seconds=duration)
