from __future__ import annotations

import argparse
import dataclasses
import importlib
import logging
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from config import get_settings_module

from .boards.model import Board
from .common.datetime_utils import parse_iso_date
from .container import Container, build_container
from .core.exceptions import DomainError
from .core.logging import configure_logging
from .reconcile.config import SyncConfig
from .reconcile.report import check_report_path, export_report

logger = logging.getLogger("timesheet_sync")


def report_path(value: str) -> str:
    try:
        check_report_path(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="timesheet-sync",
        description="Copy today's Time Doctor attendance onto the biweekly monday.com board.",
    )
    sub = parser.add_subparsers(dest="command")

    run = sub.add_parser("run", help="reconcile one day (default: today)")
    run.add_argument("--date", help="work date YYYY-MM-DD; earlier days only fill existing items")
    run.add_argument("--dry-run", action="store_true", help="compute and log writes without sending them")
    run.add_argument("--report", type=report_path, help="export the run report to .xlsx or .csv")

    inspect = sub.add_parser("inspect", help="list boards, or one board's groups and columns")
    inspect.add_argument("--board-id", help="board to describe")
    return parser


def load_config(*, dry_run: bool = False) -> SyncConfig:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    config = SyncConfig.from_settings(settings)
    if dry_run and not config.dry_run:
        config = dataclasses.replace(config, dry_run=True)
    return config


def cmd_run(container: Container, args: argparse.Namespace) -> int:
    work_date = parse_iso_date(args.date) if args.date else None
    report = container.reconciliation_service.run(work_date=work_date)
    if args.report:
        out = export_report(report, args.report)
        logger.info("Report written to %s", out)
    return 0


def cmd_inspect(container: Container, args: argparse.Namespace) -> int:
    store = container.store
    if not args.board_id:
        for board in store.list_boards():
            print(f"- {board.name} (ID: {board.board_id})")
        return 0

    board = Board(board_id=str(args.board_id), name=str(args.board_id))
    print(f"Groups in board {board.board_id}:")
    for group in store.list_groups(board):
        print(f"- {group.title} (ID: {group.group_id})")
    print(f"Columns in board {board.board_id}:")
    for col in store.list_columns(board):
        print(f"- {col.title} (id: {col.column_id}, type: {col.type})")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        args = parser.parse_args(["run", *(argv or [])])

    try:
        config = load_config(dry_run=getattr(args, "dry_run", False))
    except DomainError as exc:
        configure_logging()
        logger.error("Invalid configuration: %s", exc)
        return 1

    configure_logging(config.log_level)
    logger.info("Starting Time Doctor -> monday.com attendance sync%s", " (dry-run)" if config.dry_run else "")

    container = build_container(config=config)
    try:
        if args.command == "inspect":
            return cmd_inspect(container, args)
        return cmd_run(container, args)
    except (DomainError, ValueError) as exc:
        logger.error("Run aborted: %s", exc)
        return 1
    finally:
        container.close()


if __name__ == "__main__":
    sys.exit(main())
