"""Compiled timetable grid (plain data consumed by renderers)."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Literal, Union


@dataclass(slots=True, frozen=True)
class Cell:
    """First slot of a day-column block occurrence."""

    block_name: str
    row_span_slots: int
    color: str


@dataclass(slots=True, frozen=True)
class TimeRow:
    """One grid row labelled with a single boundary time.

    ``cells`` maps every day column to the occurrence starting at this boundary, or ``None``
    when the position is empty or already covered by an earlier cell's row-span.
    """

    label: str
    minutes: int
    cells: Mapping[str, Cell | None]
    kind: Literal["time"] = field(default="time", init=False)

    def occupied(self) -> Iterator[tuple[str, Cell]]:
        for day, cell in self.cells.items():
            if cell is not None:
                yield day, cell


@dataclass(slots=True, frozen=True)
class InvariantRow:
    """A block shared by every day column, rendered as one merged full-width cell."""

    label: str
    block_name: str
    duration_slots: int
    color: str
    minutes: int
    kind: Literal["invariant"] = field(default="invariant", init=False)


Row = Union[TimeRow, InvariantRow]


@dataclass(slots=True, frozen=True)
class Grid:
    """Ordered rows of a compiled week plus the axis metadata renderers need."""

    days: tuple[str, ...]
    interval: int
    start_minutes: int
    end_minutes: int
    rows: tuple[Row, ...]

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def time_rows(self) -> list[TimeRow]:
        return [row for row in self.rows if isinstance(row, TimeRow)]

    def invariant_rows(self) -> list[InvariantRow]:
        return [row for row in self.rows if isinstance(row, InvariantRow)]


__all__ = ["Cell", "TimeRow", "InvariantRow", "Row", "Grid"]
