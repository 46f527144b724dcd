from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import Board, Column, Group


class BoardStore(Protocol):
    """Repository interface for the tabular store (boards, groups, items).

    Note (DIP): services depend on this interface; the monday.com client is one implementation.
    """

    def find_container_by_label(self, label: str) -> Optional[Board]:
        """Exact, case-sensitive name match."""

        raise NotImplementedError

    def clone_container(self, template: Board, new_label: str) -> Board:
        """Duplicate the template's structure (columns, groups) under a new name."""

        raise NotImplementedError

    def list_columns(self, board: Board) -> Sequence[Column]:
        raise NotImplementedError

    def list_groups(self, board: Board) -> Sequence[Group]:
        raise NotImplementedError

    def find_group_by_title(self, board: Board, title: str) -> Optional[str]:
        raise NotImplementedError

    def create_group(self, board: Board, title: str) -> str:
        raise NotImplementedError

    def find_record(self, board: Board, group_id: str, name: str) -> Optional[str]:
        raise NotImplementedError

    def create_record(self, board: Board, group_id: str, name: str) -> str:
        raise NotImplementedError

    def get_field_values(self, record_id: str, column_ids: Sequence[str]) -> dict[str, Optional[str]]:
        raise NotImplementedError

    def write_fields(self, board: Board, record_id: str, values: dict[str, Any]) -> bool:
        raise NotImplementedError
