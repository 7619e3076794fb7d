"""Rich console tables for compiled grids and summaries."""

from __future__ import annotations

from collections.abc import Mapping

from rich.table import Table

from weekgrid.scheduling.grid import Grid, InvariantRow

__all__ = ["CONTINUATION", "grid_table", "summary_table"]

CONTINUATION = "⋮"


def grid_table(grid: Grid, *, title: str | None = "Weekly Schedule") -> Table:
    """Build a rich table for ``grid``.

    Terminal tables cannot merge cells, so slots covered by an earlier row-span show
    ``CONTINUATION`` and invariant rows print their block name in the first day column.
    """
    table = Table(title=title)
    table.add_column("Time", no_wrap=True)
    for day in grid.days:
        table.add_column(day)

    remaining = {day: 0 for day in grid.days}
    for row in grid.rows:
        if isinstance(row, InvariantRow):
            values = [row.block_name] + [""] * (len(grid.days) - 1)
            table.add_row(row.label, *values, style="bold")
            continue
        values = []
        for day in grid.days:
            cell = row.cells.get(day)
            if cell is not None:
                values.append(cell.block_name)
                remaining[day] = cell.row_span_slots - 1
            elif remaining[day] > 0:
                values.append(CONTINUATION)
                remaining[day] -= 1
            else:
                values.append("")
        table.add_row(row.label, *values)
    return table


def summary_table(summary: Mapping[str, int], *, title: str | None = "Block Totals") -> Table:
    table = Table(title=title)
    table.add_column("Block")
    table.add_column("Total Minutes", justify="right")
    for block, minutes in summary.items():
        table.add_row(block, str(minutes))
    return table
