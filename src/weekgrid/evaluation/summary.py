"""Aggregation helpers for compiled schedule summaries."""

from __future__ import annotations

from collections.abc import Mapping

import pandas as pd

from weekgrid.scheduling.grid import Grid, InvariantRow

__all__ = [
    "SUMMARY_COLUMNS",
    "summary_dataframe",
    "per_day_minutes",
]

SUMMARY_COLUMNS = ["block", "total_minutes", "total_hours"]


def summary_dataframe(summary: Mapping[str, int]) -> pd.DataFrame:
    """Convert a block-minute summary into a DataFrame.

    Rows keep the summary's insertion order (first occurrence in the week). ``total_hours``
    is rounded to two decimals for reporting.
    """
    if not summary:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = pd.DataFrame(
        {"block": list(summary.keys()), "total_minutes": list(summary.values())}
    )
    df["total_hours"] = (df["total_minutes"] / 60.0).round(2)
    return df.reindex(columns=SUMMARY_COLUMNS)


def per_day_minutes(grid: Grid) -> pd.DataFrame:
    """Return minutes drawn per block (rows) and day column (columns).

    Invariant rows span every day column, so their minutes are credited to each day. Shadowed
    day entries are not drawn and therefore not counted here.
    """
    totals: dict[str, dict[str, int]] = {}
    for row in grid.rows:
        if isinstance(row, InvariantRow):
            minutes = row.duration_slots * grid.interval
            per_day = totals.setdefault(row.block_name, {})
            for day in grid.days:
                per_day[day] = per_day.get(day, 0) + minutes
            continue
        for day, cell in row.occupied():
            per_day = totals.setdefault(cell.block_name, {})
            per_day[day] = per_day.get(day, 0) + cell.row_span_slots * grid.interval
    df = pd.DataFrame.from_dict(totals, orient="index")
    df = df.reindex(columns=list(grid.days)).fillna(0).astype(int)
    df.index.name = "block"
    return df
