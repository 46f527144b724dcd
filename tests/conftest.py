from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

CHICAGO = ZoneInfo("America/Chicago")


@pytest.fixture
def chicago() -> ZoneInfo:
    return CHICAGO


@pytest.fixture
def fixed_now() -> datetime:
    # Monday 16 March 2026, 18:00 in Chicago (CDT)
    return datetime(2026, 3, 16, 18, 0, tzinfo=CHICAGO)
