from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..common.validators import require_flag, require_json_object, require_non_empty, require_positive_int
from ..core import constants
from ..core.exceptions import ConfigurationError


@dataclass(frozen=True)
class SyncConfig:
    """Everything a run needs, validated once at startup.

    Built from a settings module (see `config/`); nothing reads the
    environment after this point.
    """

    td_email: str
    td_password: str
    td_company_id: str
    monday_api_key: str
    user_group_map: dict[str, str]
    column_titles: dict[str, str] = field(default_factory=lambda: dict(constants.DEFAULT_COLUMN_TITLES))
    timezone: str = constants.DEFAULT_TIMEZONE
    idle_threshold_minutes: int = constants.DEFAULT_IDLE_THRESHOLD_MINUTES
    period_year_rollover: bool = True
    td_api_url: str = constants.TD_API_URL
    monday_api_url: str = constants.MONDAY_API_URL
    token_cache_path: str = constants.DEFAULT_TOKEN_CACHE_PATH
    token_ttl_days: int = constants.DEFAULT_TOKEN_TTL_DAYS
    http_timeout_seconds: int = constants.DEFAULT_HTTP_TIMEOUT_SECONDS
    http_max_retries: int = 0
    board_list_limit: int = constants.DEFAULT_BOARD_LIST_LIMIT
    item_page_limit: int = constants.DEFAULT_ITEM_PAGE_LIMIT
    log_level: str = "INFO"
    dry_run: bool = False

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @classmethod
    def from_settings(cls, settings: Any) -> "SyncConfig":
        def get(name: str, default: Any = None) -> Any:
            return getattr(settings, name, default)

        timezone = require_non_empty(get("TIMEZONE", constants.DEFAULT_TIMEZONE), "TIMEZONE")
        try:
            ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError):
            raise ConfigurationError(f"TIMEZONE {timezone!r} is not a known time zone") from None

        column_titles = dict(constants.DEFAULT_COLUMN_TITLES)
        raw_titles = get("COLUMN_TITLES")
        if raw_titles:
            overrides = require_json_object(raw_titles, "COLUMN_TITLES")
            unknown = set(overrides) - set(column_titles)
            if unknown:
                raise ConfigurationError(f"COLUMN_TITLES has unknown keys: {', '.join(sorted(unknown))}")
            column_titles.update(overrides)

        return cls(
            td_email=require_non_empty(get("TD_USER_EMAIL"), "TD_USER_EMAIL"),
            td_password=require_non_empty(get("TD_USER_PASSWORD"), "TD_USER_PASSWORD"),
            td_company_id=require_non_empty(get("TD_COMPANY_ID"), "TD_COMPANY_ID"),
            monday_api_key=require_non_empty(get("MONDAY_API_KEY"), "MONDAY_API_KEY"),
            user_group_map=require_json_object(get("USER_GROUP_MAP", "{}"), "USER_GROUP_MAP"),
            column_titles=column_titles,
            timezone=timezone,
            idle_threshold_minutes=require_positive_int(
                get("IDLE_THRESHOLD_MINUTES", constants.DEFAULT_IDLE_THRESHOLD_MINUTES),
                "IDLE_THRESHOLD_MINUTES",
                allow_zero=True,
            ),
            period_year_rollover=require_flag(get("PERIOD_YEAR_ROLLOVER", True), "PERIOD_YEAR_ROLLOVER"),
            td_api_url=require_non_empty(get("TD_API_URL", constants.TD_API_URL), "TD_API_URL"),
            monday_api_url=require_non_empty(get("MONDAY_API_URL", constants.MONDAY_API_URL), "MONDAY_API_URL"),
            token_cache_path=require_non_empty(
                get("TOKEN_CACHE_PATH", constants.DEFAULT_TOKEN_CACHE_PATH), "TOKEN_CACHE_PATH"
            ),
            token_ttl_days=require_positive_int(get("TOKEN_TTL_DAYS", constants.DEFAULT_TOKEN_TTL_DAYS), "TOKEN_TTL_DAYS"),
            http_timeout_seconds=require_positive_int(
                get("HTTP_TIMEOUT_SECONDS", constants.DEFAULT_HTTP_TIMEOUT_SECONDS), "HTTP_TIMEOUT_SECONDS"
            ),
            http_max_retries=require_positive_int(get("HTTP_MAX_RETRIES", 0), "HTTP_MAX_RETRIES", allow_zero=True),
            board_list_limit=require_positive_int(
                get("BOARD_LIST_LIMIT", constants.DEFAULT_BOARD_LIST_LIMIT), "BOARD_LIST_LIMIT"
            ),
            item_page_limit=require_positive_int(get("ITEM_PAGE_LIMIT", constants.DEFAULT_ITEM_PAGE_LIMIT), "ITEM_PAGE_LIMIT"),
            log_level=str(get("LOG_LEVEL", "INFO")).upper(),
            dry_run=require_flag(get("DRY_RUN", False), "DRY_RUN"),
        )
