from __future__ import annotations

import json

import pytest

from src.timesheet_sync.timesheet_sync.boards import queries
from src.timesheet_sync.timesheet_sync.boards.model import Board
from src.timesheet_sync.timesheet_sync.boards.monday_board_store import MondayBoardStore
from src.timesheet_sync.timesheet_sync.core.exceptions import TransportError
from src.timesheet_sync.timesheet_sync.transport.connection import ApiConnection, HttpConfig

BOARD = Board(board_id="42", name="March 16 - March 31")


class FakeResponse:
    status_code = 200
    text = ""

    def __init__(self, payload):
        self._payload = payload

    def raise_for_status(self):
        return None

    def json(self):
        return self._payload


class FakeSession:
    def __init__(self, *payloads):
        self._payloads = list(payloads)
        self.sent = []

    def post(self, url, **kwargs):
        self.sent.append(kwargs["json"])
        return FakeResponse(self._payloads.pop(0))


def _store(*payloads, board_limit=100):
    session = FakeSession(*payloads)
    conn = ApiConnection(HttpConfig(base_url="https://monday.invalid/v2"), session=session)
    return MondayBoardStore(conn, board_limit=board_limit, item_page_limit=2), session


def test_find_container_pages_through_boards():
    store, session = _store(
        {"data": {"boards": [{"id": 1, "name": "A"}, {"id": 2, "name": "B"}]}},
        {"data": {"boards": [{"id": 3, "name": "March 16 - March 31"}]}},
        board_limit=2,
    )

    board = store.find_container_by_label("March 16 - March 31")

    assert board == Board(board_id="3", name="March 16 - March 31")
    assert [p["variables"]["page"] for p in session.sent] == [1, 2]


def test_graphql_errors_raise_transport_error():
    store, _ = _store({"errors": [{"message": "Not Authenticated"}]})

    with pytest.raises(TransportError, match="Not Authenticated"):
        store.list_columns(BOARD)


def test_find_record_follows_cursor_and_ignores_case():
    store, session = _store(
        {"data": {"boards": [{"groups": [{"items_page": {"cursor": "c1", "items": [{"id": "1", "name": "Mar 16"}, {"id": "2", "name": "Mar 17"}]}}]}]}},
        {"data": {"next_items_page": {"cursor": None, "items": [{"id": "3", "name": " mar 18 "}]}}},
    )

    assert store.find_record(BOARD, "topics", "Mar 18") == "3"
    assert session.sent[0]["variables"]["groupIds"] == ["topics"]
    assert session.sent[1]["variables"]["cursor"] == "c1"


def test_get_field_values_fills_missing_columns_with_none():
    store, _ = _store({"data": {"items": [{"column_values": [{"id": "in", "text": "8:00 AM"}, {"id": "out", "text": ""}]}]}})

    values = store.get_field_values("7", ["in", "out", "day"])

    assert values == {"in": "8:00 AM", "out": "", "day": None}


def test_write_fields_sends_values_as_json_variable():
    store, session = _store({"data": {"change_multiple_column_values": {"id": "7"}}})

    assert store.write_fields(BOARD, "7", {"hours": 8.0, "out": {"hour": 17, "minute": 0}})
    variables = session.sent[0]["variables"]
    assert variables["boardId"] == "42"
    assert variables["itemId"] == "7"
    assert json.loads(variables["columnValues"]) == {"hours": 8.0, "out": {"hour": 17, "minute": 0}}


def test_find_group_by_title_then_create():
    store, session = _store(
        {"data": {"boards": [{"groups": [{"id": "g1", "title": " Support "}]}]}},
        {"data": {"create_group": {"id": "g2"}}},
    )

    assert store.find_group_by_title(BOARD, "support") == "g1"
    assert store.create_group(BOARD, "Sales") == "g2"
    assert session.sent[1]["variables"] == {"boardId": "42", "groupName": "Sales"}


def test_clone_container_duplicates_structure():
    store, session = _store({"data": {"duplicate_board": {"board": {"id": 99, "name": "April 1 - April 15"}}}})

    board = store.clone_container(BOARD, "April 1 - April 15")

    assert board == Board(board_id="99", name="April 1 - April 15")
    assert "duplicate_board_with_structure" in session.sent[0]["query"]


def test_identifiers_never_appear_in_query_text():
    name = 'Mar 16" } mutation { delete_board'
    request = queries.create_item(board_id="42", group_id="g1", item_name=name)

    assert name not in request.query
    assert request.variables["itemName"] == name
