from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from ...core.enums import SummaryStatus
from ..model import TimeInterval


@dataclass(frozen=True)
class ClockOutDecision:
    status: SummaryStatus
    clock_out: Optional[datetime] = None


class ClockOutStrategy(ABC):
    """Strategy Pattern: encapsulate whether (and when) a user-day has ended."""

    @abstractmethod
    def decide_clock_out(self, intervals: Sequence[TimeInterval]) -> ClockOutDecision:
        raise NotImplementedError
