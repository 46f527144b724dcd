from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Board:
    """A period board (container) on the tabular store."""

    board_id: str
    name: str


@dataclass(frozen=True)
class Column:
    column_id: str
    title: str
    type: Optional[str] = None


@dataclass(frozen=True)
class Group:
    """A team grouping inside a board."""

    group_id: str
    title: str


@dataclass(frozen=True)
class FieldMapping:
    """Logical attendance field -> physical column id on one board."""

    clock_in: str
    clock_out: str
    date: str
    total_worked_hours: str

    def column_ids(self) -> list[str]:
        return [self.clock_in, self.clock_out, self.date, self.total_worked_hours]


@dataclass(frozen=True)
class ExistingFields:
    """Current text of a record's attendance columns (None when unset)."""

    clock_in: Optional[str] = None
    clock_out: Optional[str] = None
    date: Optional[str] = None
    total_worked_hours: Optional[str] = None

    @classmethod
    def from_values(cls, values: dict[str, Optional[str]], mapping: FieldMapping) -> "ExistingFields":
        return cls(
            clock_in=values.get(mapping.clock_in),
            clock_out=values.get(mapping.clock_out),
            date=values.get(mapping.date),
            total_worked_hours=values.get(mapping.total_worked_hours),
        )
