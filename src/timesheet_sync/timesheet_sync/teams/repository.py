from __future__ import annotations

from typing import Optional, Protocol


class TeamGroupingResolver(Protocol):
    def group_for_user(self, email: str) -> Optional[str]:
        """Team grouping title for a user, or None when the user is not mapped."""

        raise NotImplementedError
