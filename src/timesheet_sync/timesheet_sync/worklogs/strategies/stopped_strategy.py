from __future__ import annotations

from typing import Sequence

from ...core.enums import SummaryStatus
from ..model import TimeInterval
from .base import ClockOutDecision, ClockOutStrategy


class StoppedStrategy(ClockOutStrategy):
    """Idle past the threshold: clock out at the latest interval end."""

    def decide_clock_out(self, intervals: Sequence[TimeInterval]) -> ClockOutDecision:
        # Latest end, not end of the latest start: a long early interval can outlast a short late one.
        last = max(intervals, key=lambda i: i.end)
        return ClockOutDecision(status=SummaryStatus.COMPLETED, clock_out=last.end)
