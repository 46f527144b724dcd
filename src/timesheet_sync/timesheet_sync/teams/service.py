from __future__ import annotations

import logging
from typing import Mapping, Optional

from ..boards.model import Board
from ..boards.repository import BoardStore

logger = logging.getLogger(__name__)


class StaticTeamGroupingResolver:
    """TeamGroupingResolver backed by the USER_GROUP_MAP setting (email -> group title)."""

    def __init__(self, user_group_map: Mapping[str, str]):
        self._by_email = {email.strip().lower(): title.strip() for email, title in user_group_map.items()}

    def group_for_user(self, email: str) -> Optional[str]:
        return self._by_email.get(email.strip().lower())


class GroupDirectory:
    """Turns team titles into group ids on a board, creating missing groups.

    Ids are cached per (board, title) for the run.
    """

    def __init__(self, store: BoardStore, *, dry_run: bool = False):
        self._store = store
        self._dry_run = bool(dry_run)
        self._cache: dict[tuple[str, str], Optional[str]] = {}

    def group_id_for(self, board: Board, title: str) -> Optional[str]:
        key = (board.board_id, title.strip().lower())
        if key in self._cache:
            return self._cache[key]

        group_id = self._store.find_group_by_title(board, title)
        if not group_id:
            if self._dry_run:
                logger.warning('[dry-run] would create group "%s"', title)
            else:
                group_id = self._store.create_group(board, title)
        self._cache[key] = group_id
        return group_id
