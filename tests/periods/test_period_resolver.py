from __future__ import annotations

from datetime import datetime
from typing import Optional

import pytest

from src.timesheet_sync.timesheet_sync.boards.model import Board
from src.timesheet_sync.timesheet_sync.core.exceptions import NoPriorMonth, PeriodBoardNotFound, TemplateNotFound
from src.timesheet_sync.timesheet_sync.periods.resolver import PeriodResolver


class InMemoryBoards:
    def __init__(self, names):
        self.boards = [Board(board_id=str(i), name=n) for i, n in enumerate(names, start=1)]
        self.clones: list[tuple[str, str]] = []
        self.lookups: list[str] = []

    def find_container_by_label(self, label: str) -> Optional[Board]:
        self.lookups.append(label)
        return next((b for b in self.boards if b.name == label), None)

    def clone_container(self, template: Board, new_label: str) -> Board:
        self.clones.append((template.name, new_label))
        board = Board(board_id=str(len(self.boards) + 1), name=new_label)
        self.boards.append(board)
        return board


def test_existing_board_is_returned_without_cloning(chicago):
    store = InMemoryBoards(["March 1 - March 15"])

    board = PeriodResolver(store, tz=chicago).resolve_container(datetime(2026, 3, 10, 9, 0, tzinfo=chicago))

    assert board.name == "March 1 - March 15"
    assert store.clones == []


def test_label_match_is_case_sensitive(chicago):
    store = InMemoryBoards(["march 1 - march 15", "February 1 - February 15"])

    board = PeriodResolver(store, tz=chicago).resolve_container(datetime(2026, 3, 10, tzinfo=chicago))

    assert board.name == "March 1 - March 15"
    assert store.clones == [("February 1 - February 15", "March 1 - March 15")]


def test_missing_board_is_cloned_from_previous_month_once(chicago):
    store = InMemoryBoards(["February 1 - February 15"])
    resolver = PeriodResolver(store, tz=chicago)
    now = datetime(2026, 3, 2, 8, 0, tzinfo=chicago)

    first = resolver.resolve_container(now)
    second = resolver.resolve_container(now)

    assert first == second
    assert store.clones == [("February 1 - February 15", "March 1 - March 15")]


def test_second_half_uses_swapped_label_when_present(chicago):
    store = InMemoryBoards(["March 16 - March 30"])

    board = PeriodResolver(store, tz=chicago).resolve_container(datetime(2026, 4, 20, tzinfo=chicago))

    assert board.name == "April 16 - April 30"
    assert store.clones == [("March 16 - March 30", "April 16 - April 30")]


def test_second_half_falls_back_to_real_previous_month_end(chicago):
    store = InMemoryBoards(["February 16 - February 28"])

    board = PeriodResolver(store, tz=chicago).resolve_container(datetime(2026, 3, 20, tzinfo=chicago))

    assert board.name == "March 16 - March 31"
    assert store.lookups[1:] == ["February 16 - February 31", "February 16 - February 28"]


def test_missing_template_fails(chicago):
    store = InMemoryBoards(["January 1 - January 15"])

    with pytest.raises(TemplateNotFound):
        PeriodResolver(store, tz=chicago).resolve_container(datetime(2026, 3, 2, tzinfo=chicago))
    assert store.clones == []


def test_january_copies_december_with_rollover(chicago):
    store = InMemoryBoards(["December 16 - December 31"])

    board = PeriodResolver(store, tz=chicago).resolve_container(datetime(2027, 1, 20, tzinfo=chicago))

    assert board.name == "January 16 - January 31"
    assert store.clones == [("December 16 - December 31", "January 16 - January 31")]


def test_january_without_rollover_has_no_prior_month(chicago):
    store = InMemoryBoards(["December 1 - December 15"])

    with pytest.raises(NoPriorMonth):
        PeriodResolver(store, tz=chicago, year_rollover=False).resolve_container(datetime(2027, 1, 5, tzinfo=chicago))


def test_dry_run_reads_from_template_without_cloning(chicago):
    store = InMemoryBoards(["February 1 - February 15"])

    board = PeriodResolver(store, tz=chicago, dry_run=True).resolve_container(datetime(2026, 3, 2, tzinfo=chicago))

    assert board.name == "February 1 - February 15"
    assert store.clones == []


def test_lookup_only_never_clones_a_missing_board(chicago):
    store = InMemoryBoards(["January 16 - January 31"])

    with pytest.raises(PeriodBoardNotFound):
        PeriodResolver(store, tz=chicago).resolve_container(datetime(2026, 2, 20, tzinfo=chicago), create=False)
    assert store.clones == []
    assert store.lookups == ["February 16 - February 28"]


def test_lookup_only_returns_an_existing_board(chicago):
    store = InMemoryBoards(["February 16 - February 28"])

    board = PeriodResolver(store, tz=chicago).resolve_container(datetime(2026, 2, 20, tzinfo=chicago), create=False)

    assert board.name == "February 16 - February 28"
