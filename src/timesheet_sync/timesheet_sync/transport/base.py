from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Optional

import requests

from ..core.exceptions import TransportError
from .connection import ApiConnection


@contextmanager
def api_call(conn: ApiConnection, what: str) -> Iterator[requests.Session]:
    """Yield the session; any requests/JSON failure becomes a TransportError."""
    try:
        yield conn.session()
    except requests.RequestException as exc:
        detail = _response_detail(getattr(exc, "response", None))
        raise TransportError(f"{what} failed: {exc}{detail}") from exc
    except ValueError as exc:
        # Response.json() raises a ValueError subclass on non-JSON bodies.
        raise TransportError(f"{what} returned an unreadable body: {exc}") from exc


def _response_detail(response: Optional[requests.Response]) -> str:
    if response is None:
        return ""
    body = (response.text or "")[:300]
    return f" (HTTP {response.status_code}: {body})" if body else f" (HTTP {response.status_code})"


def json_body(response: requests.Response) -> Any:
    response.raise_for_status()
    return response.json()


def unwrap_data(payload: Any, what: str) -> Any:
    """Return payload['data'], failing loudly when the envelope is missing."""
    if not isinstance(payload, dict) or "data" not in payload:
        raise TransportError(f"{what} returned no 'data' field")
    return payload["data"]
