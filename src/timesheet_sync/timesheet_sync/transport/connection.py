from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import requests
from requests.adapters import HTTPAdapter


@dataclass
class HttpConfig:
    base_url: str
    timeout_seconds: int = 30
    max_retries: int = 0
    headers: dict[str, str] = field(default_factory=dict)


class ApiConnection:
    """HTTP session factory for one remote API.

    Note: One `requests.Session` per API for the whole run; the batch is
    sequential so the session is never shared across threads.
    """

    def __init__(self, config: HttpConfig, *, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session

    @property
    def config(self) -> HttpConfig:
        return self._config

    def url(self, path: str = "") -> str:
        if not path:
            return self._config.base_url
        return f"{self._config.base_url.rstrip('/')}/{path.lstrip('/')}"

    def session(self) -> requests.Session:
        if self._session is None:
            session = requests.Session()
            session.headers.update(self._config.headers)
            if self._config.max_retries:
                adapter = HTTPAdapter(max_retries=int(self._config.max_retries))
                session.mount("https://", adapter)
                session.mount("http://", adapter)
            self._session = session
        return self._session

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None
