from __future__ import annotations

from typing import Mapping, Optional, Sequence

from ..core.constants import DEFAULT_COLUMN_TITLES
from ..core.exceptions import MissingColumn
from .model import Board, Column, FieldMapping
from .repository import BoardStore


def resolve_field_mapping(columns: Sequence[Column], titles: Mapping[str, str]) -> FieldMapping:
    """Match each logical field to a column by trimmed, case-insensitive title."""
    by_title = {}
    for col in columns:
        by_title.setdefault(col.title.strip().lower(), col.column_id)

    ids = {}
    for key in DEFAULT_COLUMN_TITLES:
        title = titles[key]
        column_id = by_title.get(title.strip().lower())
        if not column_id:
            raise MissingColumn(f'Column titled "{title}" not found.')
        ids[key] = column_id
    return FieldMapping(**ids)


class FieldMapper:
    """Resolves and caches the FieldMapping per board for the lifetime of the process."""

    def __init__(self, store: BoardStore, titles: Optional[Mapping[str, str]] = None):
        self._store = store
        self._titles = dict(titles or DEFAULT_COLUMN_TITLES)
        self._cache: dict[str, FieldMapping] = {}

    def mapping_for(self, board: Board) -> FieldMapping:
        cached = self._cache.get(board.board_id)
        if cached:
            return cached
        mapping = resolve_field_mapping(self._store.list_columns(board), self._titles)
        self._cache[board.board_id] = mapping
        return mapping
