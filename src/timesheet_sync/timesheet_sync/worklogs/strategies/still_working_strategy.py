from __future__ import annotations

from typing import Sequence

from ...core.enums import SummaryStatus
from ..model import TimeInterval
from .base import ClockOutDecision, ClockOutStrategy


class StillWorkingStrategy(ClockOutStrategy):
    """Recent activity today: the user may resume, so no clock-out yet."""

    def decide_clock_out(self, intervals: Sequence[TimeInterval]) -> ClockOutDecision:
        return ClockOutDecision(status=SummaryStatus.IN_PROGRESS)
