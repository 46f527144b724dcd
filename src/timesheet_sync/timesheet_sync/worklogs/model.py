from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from ..core.enums import SummaryStatus


@dataclass(frozen=True)
class TimeInterval:
    """One contiguous span of tracked work, as read from the tracking provider."""

    start: datetime
    duration_seconds: int

    @property
    def end(self) -> datetime:
        return self.start + timedelta(seconds=self.duration_seconds)


@dataclass(frozen=True)
class TrackedUser:
    """A tracking-provider user.

    `last_active_at` only feeds the idle heuristic, never the hours total.
    """

    user_id: str
    email: str
    last_active_at: Optional[datetime] = None
    name: Optional[str] = None

    @property
    def email_key(self) -> str:
        return self.email.strip().lower()


@dataclass(frozen=True)
class AttendanceSummary:
    """Derived per-user-day attendance. Recomputed on every run, never stored."""

    clock_in: Optional[datetime]
    clock_out: Optional[datetime]
    total_seconds: int
    status: SummaryStatus

    @property
    def hours_worked(self) -> float:
        return self.total_seconds / 3600


NO_LOGS = AttendanceSummary(clock_in=None, clock_out=None, total_seconds=0, status=SummaryStatus.NO_LOGS)
