from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from ..common.datetime_utils import to_local
from .strategies.base import ClockOutStrategy
from .strategies.still_working_strategy import StillWorkingStrategy
from .strategies.stopped_strategy import StoppedStrategy


def idle_minutes(last_active_at: Optional[datetime], now: datetime) -> Optional[int]:
    """Whole minutes since last activity; None means never active (infinitely idle)."""
    if last_active_at is None:
        return None
    return int((now - last_active_at).total_seconds() // 60)


@dataclass
class ClockOutStrategyFactory:
    """Factory Pattern: choose the clock-out strategy from the user's last activity.

    "Same day" is the calendar day of `now` in the reporting zone; `last_active_at`
    is converted to that zone before comparing.
    """

    tz: ZoneInfo

    def for_activity(self, *, last_active_at: Optional[datetime], now: datetime, idle_threshold_minutes: int) -> ClockOutStrategy:
        idle = idle_minutes(last_active_at, now)
        if idle is None:
            return StoppedStrategy()

        same_day = to_local(last_active_at, self.tz).date() == to_local(now, self.tz).date()
        if same_day and idle <= idle_threshold_minutes:
            return StillWorkingStrategy()
        return StoppedStrategy()
