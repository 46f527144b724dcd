from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence
from zoneinfo import ZoneInfo

from ..common.datetime_utils import to_local
from ..core.constants import DEFAULT_IDLE_THRESHOLD_MINUTES, DEFAULT_TIMEZONE
from ..core.enums import SummaryStatus
from .factory import ClockOutStrategyFactory
from .model import NO_LOGS, AttendanceSummary, TimeInterval

logger = logging.getLogger(__name__)


def aggregate(
    intervals: Sequence[TimeInterval],
    last_active_at: Optional[datetime],
    now: datetime,
    idle_threshold_minutes: int = DEFAULT_IDLE_THRESHOLD_MINUTES,
    *,
    tz: Optional[ZoneInfo] = None,
    factory: Optional[ClockOutStrategyFactory] = None,
) -> AttendanceSummary:
    """Fold one user's intervals for a day into an AttendanceSummary.

    - clock_in is the earliest start (the input order is not trusted).
    - total_seconds is the plain sum of durations.
    - clock_out stays None while the user was active today within the idle
      threshold; otherwise it is the latest interval end.

    Instants in the result are expressed in the reporting zone.
    """

    if not intervals:
        return NO_LOGS

    tz = tz or ZoneInfo(DEFAULT_TIMEZONE)
    factory = factory or ClockOutStrategyFactory(tz=tz)

    # sorted() is stable, so equal starts keep their source order.
    ordered = sorted(intervals, key=lambda i: i.start)
    clock_in = to_local(ordered[0].start, tz)
    total_seconds = sum(int(i.duration_seconds) for i in ordered)

    strategy = factory.for_activity(
        last_active_at=last_active_at,
        now=now,
        idle_threshold_minutes=idle_threshold_minutes,
    )
    decision = strategy.decide_clock_out(ordered)
    clock_out = to_local(decision.clock_out, tz) if decision.clock_out else None

    if decision.status == SummaryStatus.IN_PROGRESS:
        logger.debug("still working (last active %s), clock-out left open", last_active_at)

    return AttendanceSummary(
        clock_in=clock_in,
        clock_out=clock_out,
        total_seconds=total_seconds,
        status=decision.status,
    )
