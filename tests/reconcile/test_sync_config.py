from __future__ import annotations

import importlib
from types import SimpleNamespace

import pytest

from src.timesheet_sync.timesheet_sync.core.exceptions import ConfigurationError
from src.timesheet_sync.timesheet_sync.reconcile.config import SyncConfig


def _settings(**overrides):
    values = dict(
        TD_USER_EMAIL="ops@example.com",
        TD_USER_PASSWORD="pw",
        TD_COMPANY_ID="c1",
        MONDAY_API_KEY="key",
        USER_GROUP_MAP='{"ana@example.com": "Support"}',
    )
    values.update(overrides)
    return SimpleNamespace(**values)


def test_defaults_are_applied():
    config = SyncConfig.from_settings(_settings())

    assert config.user_group_map == {"ana@example.com": "Support"}
    assert config.timezone == "America/Chicago"
    assert config.idle_threshold_minutes == 180
    assert config.column_titles["total_worked_hours"] == "Total Worked Hours"
    assert config.period_year_rollover is True
    assert config.dry_run is False


def test_testing_settings_module_is_valid():
    settings = importlib.import_module("config.testing")

    config = SyncConfig.from_settings(settings)

    assert config.td_company_id == "test-company"
    assert config.dry_run is True


def test_column_title_overrides():
    config = SyncConfig.from_settings(_settings(COLUMN_TITLES='{"date": "Work Date"}'))

    assert config.column_titles["date"] == "Work Date"
    assert config.column_titles["clock_in"] == "Clock In"


@pytest.mark.parametrize(
    "overrides",
    [
        {"USER_GROUP_MAP": "{not json"},
        {"USER_GROUP_MAP": '["a"]'},
        {"USER_GROUP_MAP": '{"ana@example.com": ""}'},
        {"COLUMN_TITLES": '{"overtime": "OT"}'},
        {"TD_COMPANY_ID": ""},
        {"MONDAY_API_KEY": None},
        {"TIMEZONE": "Mars/Olympus_Mons"},
        {"IDLE_THRESHOLD_MINUTES": "soon"},
        {"TOKEN_TTL_DAYS": 0},
        {"HTTP_MAX_RETRIES": "two"},
        {"DRY_RUN": "maybe"},
        {"PERIOD_YEAR_ROLLOVER": "sometimes"},
    ],
)
def test_bad_settings_fail_fast(overrides):
    with pytest.raises(ConfigurationError):
        SyncConfig.from_settings(_settings(**overrides))


def test_raw_environment_strings_are_parsed():
    config = SyncConfig.from_settings(
        _settings(IDLE_THRESHOLD_MINUTES="90", HTTP_MAX_RETRIES="2", DRY_RUN="0", PERIOD_YEAR_ROLLOVER="false")
    )

    assert config.idle_threshold_minutes == 90
    assert config.http_max_retries == 2
    assert config.dry_run is False
    assert config.period_year_rollover is False
