from __future__ import annotations

import importlib

import pytest

import config.config
import config.production
from src.timesheet_sync.timesheet_sync import main as cli


def test_parser_reads_run_options():
    args = cli.build_parser().parse_args(["run", "--date", "2026-03-15", "--dry-run", "--report", "out.xlsx"])

    assert args.command == "run"
    assert args.date == "2026-03-15"
    assert args.dry_run is True
    assert args.report == "out.xlsx"


def test_load_config_uses_testing_settings(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    config = cli.load_config(dry_run=True)

    assert config.td_company_id == "test-company"
    assert config.dry_run is True


def test_invalid_configuration_exits_with_error(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setattr("config.testing.USER_GROUP_MAP", "{broken")

    assert cli.main(["run"]) == 1


def test_unsupported_report_format_is_rejected_before_running():
    with pytest.raises(SystemExit) as exc:
        cli.build_parser().parse_args(["run", "--report", "out.json"])

    assert exc.value.code == 2


@pytest.fixture
def production_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    for name, value in {
        "TD_USER_EMAIL": "ops@example.com",
        "TD_USER_PASSWORD": "pw",
        "TD_COMPANY_ID": "c1",
        "MONDAY_API_KEY": "key",
    }.items():
        monkeypatch.setenv(name, value)
    yield monkeypatch
    monkeypatch.undo()
    importlib.reload(config.config)
    importlib.reload(config.production)


def test_malformed_integer_env_var_exits_with_error(production_env, capsys):
    production_env.setenv("IDLE_THRESHOLD_MINUTES", "three hours")
    importlib.reload(config.config)
    importlib.reload(config.production)

    assert cli.main(["run", "--dry-run"]) == 1
    assert "IDLE_THRESHOLD_MINUTES must be an integer" in capsys.readouterr().out
