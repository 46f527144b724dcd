from __future__ import annotations

import json
import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, Optional

from ..common.datetime_utils import parse_instant
from ..core.constants import DEFAULT_TOKEN_TTL_DAYS
from ..core.exceptions import TransportError
from ..transport.base import api_call, json_body, unwrap_data
from ..transport.connection import ApiConnection

logger = logging.getLogger(__name__)


class TimeDoctorTokenProvider:
    """Logs in to Time Doctor and caches the token on disk.

    The cache file holds `{"token": ..., "expiresAt": ISO-8601}`. A missing,
    expired or unreadable cache triggers a fresh login.
    """

    def __init__(
        self,
        conn: ApiConnection,
        *,
        email: str,
        password: str,
        cache_path: Path | str,
        ttl_days: int = DEFAULT_TOKEN_TTL_DAYS,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._conn = conn
        self._email = email
        self._password = password
        self._cache_path = Path(cache_path)
        self._ttl = timedelta(days=int(ttl_days))
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._token: Optional[str] = None

    def get_token(self) -> str:
        if self._token:
            return self._token

        cached = self._read_cache()
        if cached:
            self._token = cached
            return cached

        token = self._login()
        self._write_cache(token)
        self._token = token
        return token

    def _login(self) -> str:
        with api_call(self._conn, "Time Doctor login") as session:
            response = session.post(
                self._conn.url("login"),
                json={"email": self._email, "password": self._password, "permissions": "read"},
                timeout=self._conn.config.timeout_seconds,
            )
            data = unwrap_data(json_body(response), "Time Doctor login")
        token = data.get("token") if isinstance(data, dict) else None
        if not token:
            raise TransportError("Time Doctor login returned no token")
        logger.info("Logged in to Time Doctor as %s", self._email)
        return str(token)

    def _read_cache(self) -> Optional[str]:
        if not self._cache_path.exists():
            return None
        try:
            payload = json.loads(self._cache_path.read_text(encoding="utf-8"))
            token = payload["token"]
            expires_at = parse_instant(payload["expiresAt"])
        except (OSError, ValueError, KeyError, TypeError, AttributeError):
            logger.warning("Ignoring unreadable token cache %s", self._cache_path)
            return None
        if self._clock() >= expires_at:
            logger.info("Cached Time Doctor token expired at %s", expires_at.isoformat())
            return None
        return str(token)

    def _write_cache(self, token: str) -> None:
        expires_at = self._clock() + self._ttl
        payload = {"token": token, "expiresAt": expires_at.isoformat()}
        self._cache_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
