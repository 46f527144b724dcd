from __future__ import annotations

from datetime import date, datetime, time, timezone
from zoneinfo import ZoneInfo

from ..core.constants import MONTHS


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_instant(value: str) -> datetime:
    """Parse an ISO-8601 timestamp from an API payload into an aware datetime.

    A trailing 'Z' is accepted, and naive values are taken as UTC.
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def now_local(tz: ZoneInfo) -> datetime:
    """Current time in the reporting zone.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(tz)


def to_local(value: datetime, tz: ZoneInfo) -> datetime:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(tz)


def start_of_day(day: date, tz: ZoneInfo) -> datetime:
    return datetime.combine(day, time.min, tzinfo=tz)


def record_name_for(day: date) -> str:
    """Board item name for a work date, e.g. 'Oct 18'."""
    return f"{MONTHS[day.month - 1][:3]} {day.day}"
