from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

from ..common.datetime_utils import to_local
from ..core.constants import MONTHS
from ..core.exceptions import MalformedPeriodLabel

LABEL_PATTERN = re.compile(r"^([A-Za-z]+) (1 - \1 15|16 - \1 \d{1,2})$")


@dataclass(frozen=True)
class Period:
    """Half-month reporting window. Derived from wall-clock time, never stored."""

    label: str
    start_date: date
    end_date: date


@dataclass(frozen=True)
class ParsedLabel:
    month: str
    range_suffix: str

    @property
    def first_half(self) -> bool:
        return self.range_suffix.startswith("1 - ")


def period_for(now: datetime, tz: Optional[ZoneInfo] = None) -> Period:
    """Period containing `now` (converted to `tz` when given)."""
    local = to_local(now, tz) if tz else now
    month = MONTHS[local.month - 1]
    if local.day <= 15:
        return Period(
            label=f"{month} 1 - {month} 15",
            start_date=date(local.year, local.month, 1),
            end_date=date(local.year, local.month, 15),
        )

    last_day = calendar.monthrange(local.year, local.month)[1]
    return Period(
        label=f"{month} 16 - {month} {last_day}",
        start_date=date(local.year, local.month, 16),
        end_date=date(local.year, local.month, last_day),
    )


def parse_label(label: str) -> ParsedLabel:
    match = LABEL_PATTERN.match(label)
    if not match or match.group(1) not in MONTHS:
        raise MalformedPeriodLabel(f'Period label "{label}" does not match the expected format')
    return ParsedLabel(month=match.group(1), range_suffix=match.group(2))
