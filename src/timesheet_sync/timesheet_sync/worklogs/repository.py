from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import TimeInterval, TrackedUser


class TokenProvider(Protocol):
    def get_token(self) -> str:
        """Return a valid API token, refreshing the cache when needed."""

        raise NotImplementedError


class TrackingProvider(Protocol):
    """Read side of the time-tracking provider.

    Note (DIP): the reconciliation service depends on this interface, not on Time Doctor directly.
    """

    def list_users(self, company_id: str) -> Sequence[TrackedUser]:
        raise NotImplementedError

    def list_worklogs(
        self,
        company_id: str,
        user_ids: Sequence[str],
        since: datetime,
    ) -> dict[str, list[TimeInterval]]:
        """Intervals keyed by user id. Users without intervals may be absent."""

        raise NotImplementedError
