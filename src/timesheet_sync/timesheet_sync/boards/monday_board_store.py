from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..core.constants import DEFAULT_BOARD_LIST_LIMIT, DEFAULT_ITEM_PAGE_LIMIT
from ..core.exceptions import TransportError
from ..transport.base import api_call, json_body
from ..transport.connection import ApiConnection
from . import queries
from .model import Board, Column, Group
from .queries import GraphQLRequest

logger = logging.getLogger(__name__)


class MondayBoardStore:
    """BoardStore backed by the monday.com GraphQL API (v2)."""

    def __init__(
        self,
        conn: ApiConnection,
        *,
        board_limit: int = DEFAULT_BOARD_LIST_LIMIT,
        item_page_limit: int = DEFAULT_ITEM_PAGE_LIMIT,
    ):
        self._conn = conn
        self._board_limit = int(board_limit)
        self._item_page_limit = int(item_page_limit)

    def _execute(self, request: GraphQLRequest) -> dict[str, Any]:
        with api_call(self._conn, f"monday.com {request.name}") as session:
            response = session.post(
                self._conn.url(),
                json=request.payload(),
                timeout=self._conn.config.timeout_seconds,
            )
            body = json_body(response)

        # GraphQL reports failures with HTTP 200 and an errors list.
        errors = body.get("errors") if isinstance(body, dict) else None
        if errors:
            messages = "; ".join(str(e.get("message", e)) if isinstance(e, dict) else str(e) for e in errors)
            raise TransportError(f"monday.com {request.name} failed: {messages}")
        if isinstance(body, dict) and body.get("error_message"):
            raise TransportError(f"monday.com {request.name} failed: {body['error_message']}")

        data = body.get("data") if isinstance(body, dict) else None
        if data is None:
            raise TransportError(f"monday.com {request.name} returned no data")
        return data

    def _first_board(self, data: dict[str, Any], what: str) -> dict[str, Any]:
        boards = data.get("boards") or []
        if not boards:
            raise TransportError(f"monday.com {what}: board not found")
        return boards[0]

    # Boards

    def list_boards(self) -> list[Board]:
        boards: list[Board] = []
        page = 1
        while True:
            data = self._execute(queries.list_boards(limit=self._board_limit, page=page))
            rows = data.get("boards") or []
            boards.extend(Board(board_id=str(r["id"]), name=r["name"]) for r in rows)
            if len(rows) < self._board_limit:
                return boards
            page += 1

    def find_container_by_label(self, label: str) -> Optional[Board]:
        for board in self.list_boards():
            if board.name == label:
                return board
        return None

    def clone_container(self, template: Board, new_label: str) -> Board:
        data = self._execute(queries.duplicate_board(board_id=template.board_id, board_name=new_label))
        board = (data.get("duplicate_board") or {}).get("board")
        if not board:
            raise TransportError(f'monday.com duplicate_board returned no board for "{new_label}"')
        return Board(board_id=str(board["id"]), name=board.get("name") or new_label)

    def list_columns(self, board: Board) -> Sequence[Column]:
        data = self._execute(queries.board_columns(board_id=board.board_id))
        rows = self._first_board(data, "columns").get("columns") or []
        return [Column(column_id=r["id"], title=r["title"], type=r.get("type")) for r in rows]

    # Groups

    def list_groups(self, board: Board) -> Sequence[Group]:
        data = self._execute(queries.board_groups(board_id=board.board_id))
        rows = self._first_board(data, "groups").get("groups") or []
        return [Group(group_id=r["id"], title=r["title"]) for r in rows]

    def find_group_by_title(self, board: Board, title: str) -> Optional[str]:
        wanted = title.strip().lower()
        for group in self.list_groups(board):
            if group.title.strip().lower() == wanted:
                return group.group_id
        return None

    def create_group(self, board: Board, title: str) -> str:
        data = self._execute(queries.create_group(board_id=board.board_id, group_name=title))
        group_id = (data.get("create_group") or {}).get("id")
        if not group_id:
            raise TransportError(f'monday.com create_group returned no id for "{title}"')
        logger.info('Created group "%s" -> ID: %s', title, group_id)
        return str(group_id)

    # Items

    def _group_items(self, board: Board, group_id: str) -> list[dict[str, Any]]:
        data = self._execute(queries.group_items(board_id=board.board_id, group_id=group_id, limit=self._item_page_limit))
        groups = self._first_board(data, "items").get("groups") or []
        if not groups:
            return []
        page = groups[0].get("items_page") or {}
        items = list(page.get("items") or [])
        cursor = page.get("cursor")
        while cursor:
            data = self._execute(queries.next_items(cursor=cursor, limit=self._item_page_limit))
            page = data.get("next_items_page") or {}
            items.extend(page.get("items") or [])
            cursor = page.get("cursor")
        return items

    def find_record(self, board: Board, group_id: str, name: str) -> Optional[str]:
        wanted = name.strip().lower()
        for item in self._group_items(board, group_id):
            if str(item.get("name", "")).strip().lower() == wanted:
                return str(item["id"])
        return None

    def create_record(self, board: Board, group_id: str, name: str) -> str:
        data = self._execute(queries.create_item(board_id=board.board_id, group_id=group_id, item_name=name))
        item_id = (data.get("create_item") or {}).get("id")
        if not item_id:
            raise TransportError(f'monday.com create_item returned no id for "{name}"')
        return str(item_id)

    def get_field_values(self, record_id: str, column_ids: Sequence[str]) -> dict[str, Optional[str]]:
        data = self._execute(queries.item_column_values(item_id=record_id, column_ids=column_ids))
        items = data.get("items") or []
        if not items:
            raise TransportError(f"monday.com item {record_id} not found")
        values = {cid: None for cid in column_ids}
        for col in items[0].get("column_values") or []:
            values[col["id"]] = col.get("text")
        return values

    def write_fields(self, board: Board, record_id: str, values: dict[str, Any]) -> bool:
        data = self._execute(queries.change_column_values(board_id=board.board_id, item_id=record_id, values=values))
        return bool((data.get("change_multiple_column_values") or {}).get("id"))
