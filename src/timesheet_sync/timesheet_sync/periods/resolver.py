from __future__ import annotations

import calendar
import logging
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from ..boards.model import Board
from ..boards.repository import BoardStore
from ..common.datetime_utils import to_local
from ..core.constants import MONTHS
from ..core.exceptions import NoPriorMonth, PeriodBoardNotFound, TemplateNotFound
from .model import ParsedLabel, parse_label, period_for

logger = logging.getLogger(__name__)


class PeriodResolver:
    """Find the current period's board, duplicating last month's board when it is missing.

    Labels carry no year. With `year_rollover` on, January copies the
    December board of the year before; with it off, January raises NoPriorMonth.
    """

    def __init__(
        self,
        store: BoardStore,
        *,
        tz: ZoneInfo,
        year_rollover: bool = True,
        dry_run: bool = False,
    ):
        self._store = store
        self._tz = tz
        self._year_rollover = bool(year_rollover)
        self._dry_run = bool(dry_run)

    def resolve_container(self, now: datetime, *, create: bool = True) -> Board:
        """Return the board for the period containing `now`.

        With `create=False` the board is only looked up; a missing board
        raises PeriodBoardNotFound instead of being copied from a template.
        """
        local = to_local(now, self._tz)
        label = period_for(local).label

        existing = self._store.find_container_by_label(label)
        if existing:
            return existing
        if not create:
            raise PeriodBoardNotFound(f'Board "{label}" not found and not creating a past period')

        logger.info('Board "%s" not found. Looking for previous template...', label)
        parsed = parse_label(label)

        template: Optional[Board] = None
        candidates = self.template_labels(parsed, year=local.year)
        for candidate in candidates:
            template = self._store.find_container_by_label(candidate)
            if template:
                break
        if not template:
            raise TemplateNotFound(f'No template board found: "{candidates[0]}"')

        if self._dry_run:
            logger.warning('[dry-run] would duplicate "%s" as "%s"; reading from the template instead', template.name, label)
            return template

        logger.info('Duplicating "%s" as "%s"...', template.name, label)
        return self._store.clone_container(template, label)

    def template_labels(self, parsed: ParsedLabel, *, year: int) -> list[str]:
        """Labels to try for the previous month's board, most specific first.

        The first is the current range with the month name swapped. For the
        second half of a month whose predecessor has a different length, the
        predecessor's real second-half label follows.
        """
        index = MONTHS.index(parsed.month)
        if index == 0 and not self._year_rollover:
            raise NoPriorMonth(f"Invalid or earliest month: {parsed.month}")

        previous = MONTHS[index - 1]
        prev_year = year - 1 if index == 0 else year
        labels = [f"{previous} {parsed.range_suffix.replace(parsed.month, previous)}"]

        if not parsed.first_half:
            last_day = calendar.monthrange(prev_year, index if index else 12)[1]
            actual = f"{previous} 16 - {previous} {last_day}"
            if actual not in labels:
                labels.append(actual)
        return labels
