from __future__ import annotations

from enum import Enum


class SummaryStatus(str, Enum):
    """Attendance state derived for one user-day."""

    NO_LOGS = "NO_LOGS"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class SkipReason(str, Enum):
    """Why a user was left out of a run (end-of-run report)."""

    NO_GROUP = "NO_GROUP"
    NO_RECORD = "NO_RECORD"
    TRANSPORT = "TRANSPORT"


class OutcomeStatus(str, Enum):
    """Per-user result of one reconciliation run."""

    UPDATED = "UPDATED"
    UNCHANGED = "UNCHANGED"
    NO_LOGS = "NO_LOGS"
    SKIPPED = "SKIPPED"
