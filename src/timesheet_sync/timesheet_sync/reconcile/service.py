from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Optional, Sequence

from ..boards.field_mapper import FieldMapper
from ..boards.model import Board, ExistingFields, FieldMapping
from ..boards.projector import Projector
from ..boards.repository import BoardStore
from ..common.datetime_utils import now_local, record_name_for, start_of_day, to_local
from ..core.enums import OutcomeStatus, SkipReason
from ..core.exceptions import MissingMapping, TransportError
from ..periods.resolver import PeriodResolver
from ..teams.repository import TeamGroupingResolver
from ..teams.service import GroupDirectory
from ..worklogs.aggregator import aggregate
from ..worklogs.model import TimeInterval, TrackedUser
from ..worklogs.repository import TrackingProvider
from .config import SyncConfig
from .model import RunReport, UserOutcome

logger = logging.getLogger(__name__)


class ReconciliationService:
    """Use case: push one day of tracked attendance onto the period board.

    Setup (board, columns, users, worklogs) failing aborts the run. After that
    each user is handled on its own: a missing group, a missing record or a
    transport error skips that user and is reported at the end.
    """

    def __init__(
        self,
        tracking: TrackingProvider,
        store: BoardStore,
        teams: TeamGroupingResolver,
        *,
        config: SyncConfig,
        resolver: Optional[PeriodResolver] = None,
        field_mapper: Optional[FieldMapper] = None,
        groups: Optional[GroupDirectory] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._tracking = tracking
        self._store = store
        self._teams = teams
        self._config = config
        self._tz = config.tz
        self._dry_run = config.dry_run
        self._resolver = resolver or PeriodResolver(
            store, tz=self._tz, year_rollover=config.period_year_rollover, dry_run=config.dry_run
        )
        self._field_mapper = field_mapper or FieldMapper(store, config.column_titles)
        self._groups = groups or GroupDirectory(store, dry_run=config.dry_run)
        self._clock = clock or (lambda: now_local(self._tz))

    def run(self, *, now: Optional[datetime] = None, work_date: Optional[date] = None) -> RunReport:
        now = to_local(now or self._clock(), self._tz)
        today = now.date()
        work_date = work_date or today
        if work_date > today:
            raise ValueError(f"Cannot reconcile a future date: {work_date.isoformat()}")
        day_start = start_of_day(work_date, self._tz)

        if work_date == today:
            board = self._resolver.resolve_container(now)
        else:
            board = self._resolver.resolve_container(day_start, create=False)
        mapping = self._field_mapper.mapping_for(board)
        projector = Projector(mapping, self._tz)

        users = self._tracking.list_users(self._config.td_company_id)
        logger.info("Users loaded: %d", len(users))
        worklogs = self._tracking.list_worklogs(
            self._config.td_company_id,
            [u.user_id for u in users],
            since=day_start,
        )

        report = RunReport(board_name=board.name, work_date=work_date, dry_run=self._dry_run)
        for user in self._unique_by_email(users):
            intervals = [i for i in worklogs.get(user.user_id, []) if to_local(i.start, self._tz).date() == work_date]
            if not intervals:
                report.add(UserOutcome(email=user.email, status=OutcomeStatus.NO_LOGS))
                continue

            try:
                outcome = self._reconcile_user(
                    user,
                    intervals,
                    board=board,
                    mapping=mapping,
                    projector=projector,
                    now=now,
                    work_date=work_date,
                )
            except MissingMapping as exc:
                logger.warning("%s: %s", user.email, exc)
                outcome = UserOutcome(
                    email=user.email,
                    status=OutcomeStatus.SKIPPED,
                    reason=exc.reason,
                    detail=str(exc),
                )
            except TransportError as exc:
                logger.warning("%s: %s", user.email, exc)
                outcome = UserOutcome(
                    email=user.email,
                    status=OutcomeStatus.SKIPPED,
                    reason=SkipReason.TRANSPORT,
                    detail=str(exc),
                )
            report.add(outcome)

        self._log_report(report)
        return report

    def _unique_by_email(self, users: Sequence[TrackedUser]) -> list[TrackedUser]:
        seen: dict[str, TrackedUser] = {}
        for user in users:
            if user.email_key in seen:
                logger.warning("Duplicate tracking user for %s (ids %s, %s); using the first", user.email, seen[user.email_key].user_id, user.user_id)
                continue
            seen[user.email_key] = user
        return list(seen.values())

    def _reconcile_user(
        self,
        user: TrackedUser,
        intervals: Sequence[TimeInterval],
        *,
        board: Board,
        mapping: FieldMapping,
        projector: Projector,
        now: datetime,
        work_date: date,
    ) -> UserOutcome:
        logger.info("Processing: %s (User ID: %s), worklogs found: %d", user.email, user.user_id, len(intervals))

        title = self._teams.group_for_user(user.email)
        if not title:
            raise MissingMapping(f"No group title mapped for {user.email}", reason=SkipReason.NO_GROUP)

        group_id = self._groups.group_id_for(board, title)
        record_id = self._store.find_record(board, group_id, record_name_for(work_date)) if group_id else None
        if not record_id:
            record_id = self._create_record(board, group_id, work_date=work_date, today=now.date())

        if record_id:
            values = self._store.get_field_values(record_id, mapping.column_ids())
            existing = ExistingFields.from_values(values, mapping)
        else:
            existing = ExistingFields()

        # A past day is closed: only today's run may leave the clock-out open.
        last_active_at = user.last_active_at if work_date == now.date() else None
        summary = aggregate(
            intervals,
            last_active_at,
            now,
            self._config.idle_threshold_minutes,
            tz=self._tz,
        )
        logger.info(
            "Clock In: %s, Clock Out: %s, Hours Worked: %.2f (%s)",
            summary.clock_in.strftime("%H:%M") if summary.clock_in else "N/A",
            summary.clock_out.strftime("%H:%M") if summary.clock_out else "N/A",
            summary.hours_worked,
            summary.status.value,
        )

        record_date = now if work_date == now.date() else work_date
        updates = projector.project(existing, summary, record_date)
        outcome = dict(
            email=user.email,
            summary_status=summary.status,
            clock_in=summary.clock_in,
            clock_out=summary.clock_out,
            hours_worked=summary.hours_worked,
        )
        if not updates:
            logger.info("No updates needed for %s", user.email)
            return UserOutcome(status=OutcomeStatus.UNCHANGED, **outcome)

        if self._dry_run or not record_id:
            logger.info("[dry-run] would write %s for %s", updates, user.email)
        else:
            self._store.write_fields(board, record_id, updates)
            logger.info("Board updated for %s", user.email)
        return UserOutcome(status=OutcomeStatus.UPDATED, written_columns=tuple(updates), **outcome)

    def _create_record(self, board: Board, group_id: Optional[str], *, work_date: date, today: date) -> Optional[str]:
        name = record_name_for(work_date)
        if work_date != today:
            raise MissingMapping(f'No item found for "{name}" and not creating a back-dated one', reason=SkipReason.NO_RECORD)
        if self._dry_run or not group_id:
            logger.info('[dry-run] would create item "%s"', name)
            return None
        logger.info('Creating item "%s" in group "%s"', name, group_id)
        return self._store.create_record(board, group_id, name)

    def _log_report(self, report: RunReport) -> None:
        logger.info(
            "Run finished for %s on %s: %d updated, %d unchanged, %d without worklogs, %d skipped",
            report.board_name,
            report.work_date.isoformat(),
            len(report.updated),
            len(report.unchanged),
            len(report.no_logs),
            len(report.skipped),
        )
        if report.no_logs:
            logger.info("Skipped %d user(s) with no worklogs:", len(report.no_logs))
            for o in report.no_logs:
                logger.info("- %s", o.email)
        for o in report.skipped:
            logger.warning("Skipped %s (%s): %s", o.email, o.reason.value if o.reason else "-", o.detail)
