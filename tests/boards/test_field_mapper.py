import pytest

from src.timesheet_sync.timesheet_sync.boards.field_mapper import FieldMapper, resolve_field_mapping
from src.timesheet_sync.timesheet_sync.boards.model import Board, Column
from src.timesheet_sync.timesheet_sync.core.constants import DEFAULT_COLUMN_TITLES
from src.timesheet_sync.timesheet_sync.core.exceptions import MissingColumn

COLUMNS = [
    Column(column_id="name", title="Name"),
    Column(column_id="hour_in", title=" clock in "),
    Column(column_id="hour_out", title="Clock Out"),
    Column(column_id="date4", title="DATE"),
    Column(column_id="numbers", title="Total Worked Hours"),
]


def test_titles_match_trimmed_and_case_insensitive():
    mapping = resolve_field_mapping(COLUMNS, DEFAULT_COLUMN_TITLES)

    assert mapping.clock_in == "hour_in"
    assert mapping.clock_out == "hour_out"
    assert mapping.date == "date4"
    assert mapping.total_worked_hours == "numbers"


def test_missing_column_is_a_configuration_error():
    with pytest.raises(MissingColumn, match="Total Worked Hours"):
        resolve_field_mapping(COLUMNS[:-1], DEFAULT_COLUMN_TITLES)


class CountingStore:
    def __init__(self):
        self.calls = 0

    def list_columns(self, board):
        self.calls += 1
        return COLUMNS


def test_mapping_is_cached_per_board():
    store = CountingStore()
    mapper = FieldMapper(store)
    board = Board(board_id="1", name="March 1 - March 15")

    assert mapper.mapping_for(board) == mapper.mapping_for(board)
    assert store.calls == 1
