from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional, Union
from zoneinfo import ZoneInfo

from ..common.datetime_utils import to_local
from ..worklogs.model import AttendanceSummary
from .model import ExistingFields, FieldMapping


def is_empty(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def hour_value(moment: datetime, tz: ZoneInfo) -> dict[str, int]:
    local = to_local(moment, tz)
    return {"hour": local.hour, "minute": local.minute}


def date_value(record_date: Union[date, datetime], tz: ZoneInfo) -> dict[str, str]:
    if isinstance(record_date, datetime):
        local = to_local(record_date, tz)
        return {"date": local.strftime("%Y-%m-%d"), "time": local.strftime("%H:%M:%S")}
    return {"date": record_date.strftime("%Y-%m-%d")}


class Projector:
    """Turns an AttendanceSummary into the minimal set of column writes for one record.

    Clock In, Clock Out and Date are fill-only: once a value is present on the
    board (including manual corrections) it is never replaced. Total Worked
    Hours is refreshed on every run while hours are positive.
    """

    def __init__(self, mapping: FieldMapping, tz: ZoneInfo):
        self._mapping = mapping
        self._tz = tz

    def project(
        self,
        existing: ExistingFields,
        summary: AttendanceSummary,
        record_date: Union[date, datetime],
    ) -> dict[str, Any]:
        updates: dict[str, Any] = {}

        if is_empty(existing.clock_in) and summary.clock_in is not None:
            updates[self._mapping.clock_in] = hour_value(summary.clock_in, self._tz)

        if is_empty(existing.clock_out) and summary.clock_out is not None:
            updates[self._mapping.clock_out] = hour_value(summary.clock_out, self._tz)

        if is_empty(existing.date):
            updates[self._mapping.date] = date_value(record_date, self._tz)

        hours = summary.total_seconds / 3600
        if hours > 0:
            updates[self._mapping.total_worked_hours] = hours

        return updates
