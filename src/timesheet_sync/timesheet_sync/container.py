from __future__ import annotations

from dataclasses import dataclass

from .boards.field_mapper import FieldMapper
from .boards.monday_board_store import MondayBoardStore
from .periods.resolver import PeriodResolver
from .reconcile.config import SyncConfig
from .reconcile.service import ReconciliationService
from .teams.service import GroupDirectory, StaticTeamGroupingResolver
from .transport.connection import ApiConnection, HttpConfig
from .worklogs.auth import TimeDoctorTokenProvider
from .worklogs.timedoctor_tracking_provider import TimeDoctorTrackingProvider


@dataclass(frozen=True)
class Container:
    config: SyncConfig

    td_conn: ApiConnection
    monday_conn: ApiConnection

    tokens: TimeDoctorTokenProvider
    tracking: TimeDoctorTrackingProvider
    store: MondayBoardStore
    teams: StaticTeamGroupingResolver

    period_resolver: PeriodResolver
    field_mapper: FieldMapper
    reconciliation_service: ReconciliationService

    def close(self) -> None:
        self.td_conn.close()
        self.monday_conn.close()


def build_container(*, config: SyncConfig) -> Container:
    td_conn = ApiConnection(
        HttpConfig(
            base_url=config.td_api_url,
            timeout_seconds=config.http_timeout_seconds,
            max_retries=config.http_max_retries,
        )
    )
    monday_conn = ApiConnection(
        HttpConfig(
            base_url=config.monday_api_url,
            timeout_seconds=config.http_timeout_seconds,
            max_retries=config.http_max_retries,
            headers={"Authorization": config.monday_api_key, "Content-Type": "application/json"},
        )
    )

    tokens = TimeDoctorTokenProvider(
        td_conn,
        email=config.td_email,
        password=config.td_password,
        cache_path=config.token_cache_path,
        ttl_days=config.token_ttl_days,
    )
    tracking = TimeDoctorTrackingProvider(td_conn, tokens)
    store = MondayBoardStore(
        monday_conn,
        board_limit=config.board_list_limit,
        item_page_limit=config.item_page_limit,
    )
    teams = StaticTeamGroupingResolver(config.user_group_map)

    period_resolver = PeriodResolver(
        store,
        tz=config.tz,
        year_rollover=config.period_year_rollover,
        dry_run=config.dry_run,
    )
    field_mapper = FieldMapper(store, config.column_titles)
    reconciliation_service = ReconciliationService(
        tracking,
        store,
        teams,
        config=config,
        resolver=period_resolver,
        field_mapper=field_mapper,
        groups=GroupDirectory(store, dry_run=config.dry_run),
    )

    return Container(
        config=config,
        td_conn=td_conn,
        monday_conn=monday_conn,
        tokens=tokens,
        tracking=tracking,
        store=store,
        teams=teams,
        period_resolver=period_resolver,
        field_mapper=field_mapper,
        reconciliation_service=reconciliation_service,
    )
