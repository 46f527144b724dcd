from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..core.enums import OutcomeStatus, SkipReason, SummaryStatus


@dataclass(frozen=True)
class UserOutcome:
    email: str
    status: OutcomeStatus
    summary_status: Optional[SummaryStatus] = None
    clock_in: Optional[datetime] = None
    clock_out: Optional[datetime] = None
    hours_worked: float = 0.0
    written_columns: tuple[str, ...] = ()
    reason: Optional[SkipReason] = None
    detail: Optional[str] = None


@dataclass
class RunReport:
    """End-of-run summary. Per-user problems land here instead of failing the run."""

    board_name: str
    work_date: date
    dry_run: bool = False
    outcomes: list[UserOutcome] = field(default_factory=list)

    def add(self, outcome: UserOutcome) -> None:
        self.outcomes.append(outcome)

    def _with(self, status: OutcomeStatus) -> list[UserOutcome]:
        return [o for o in self.outcomes if o.status == status]

    @property
    def updated(self) -> list[UserOutcome]:
        return self._with(OutcomeStatus.UPDATED)

    @property
    def unchanged(self) -> list[UserOutcome]:
        return self._with(OutcomeStatus.UNCHANGED)

    @property
    def no_logs(self) -> list[UserOutcome]:
        return self._with(OutcomeStatus.NO_LOGS)

    @property
    def skipped(self) -> list[UserOutcome]:
        return self._with(OutcomeStatus.SKIPPED)

    def rows(self) -> list[dict]:
        """Flat rows for export (one per user)."""
        out = []
        for o in self.outcomes:
            out.append(
                {
                    "work_date": self.work_date.strftime("%Y-%m-%d"),
                    "email": o.email,
                    "outcome": o.status.value,
                    "attendance": o.summary_status.value if o.summary_status else "-",
                    "clock_in": o.clock_in.strftime("%H:%M") if o.clock_in else "-",
                    "clock_out": o.clock_out.strftime("%H:%M") if o.clock_out else "-",
                    "hours_worked": round(o.hours_worked, 2),
                    "written_columns": ", ".join(o.written_columns),
                    "reason": o.reason.value if o.reason else "",
                    "detail": o.detail or "",
                }
            )
        return out
