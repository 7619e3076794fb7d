"""HTML table rendering for compiled grids and summaries."""

from __future__ import annotations

import html
from collections.abc import Mapping
from typing import Any

from weekgrid.core.config import GridConfig
from weekgrid.core.errors import ScheduleError
from weekgrid.scenario.io.loaders import parse_document
from weekgrid.scheduling.compiler import compile_schedule
from weekgrid.scheduling.grid import Grid, InvariantRow

__all__ = ["render_grid_html", "render_summary_html", "render_document_html"]


def _h(value: Any) -> str:
    return html.escape("" if value is None else str(value))


def _header(labels: list[str]) -> str:
    cells = "".join(f"<th>{_h(label)}</th>" for label in labels)
    return f"<thead><tr>{cells}</tr></thead>"


def render_grid_html(grid: Grid) -> str:
    """Render ``grid`` as a bordered ``<table>``.

    Day cells carry ``rowspan`` equal to their slot count; positions covered by an earlier
    row-span are omitted so the browser's table layout fills them. Invariant rows become one
    cell with ``colspan`` equal to the number of day columns.
    """
    lines = ['<table border="1">', _header(["Time", *grid.days]), "<tbody>"]
    for row in grid.rows:
        if isinstance(row, InvariantRow):
            lines.append(
                f"<tr><td>{_h(row.label)}</td>"
                f'<td colspan="{len(grid.days)}" rowspan="1" '
                f'style="background-color: {_h(row.color)}">{_h(row.block_name)}</td></tr>'
            )
            continue
        parts = [f"<tr><td>{_h(row.label)}</td>"]
        for _, cell in row.occupied():
            parts.append(
                f'<td rowspan="{cell.row_span_slots}" '
                f'style="background-color: {_h(cell.color)}">{_h(cell.block_name)}</td>'
            )
        parts.append("</tr>")
        lines.append("".join(parts))
    lines.extend(["</tbody>", "</table>"])
    return "\n".join(lines)


def render_summary_html(summary: Mapping[str, int]) -> str:
    """Render block totals as a two-column ``Block | Total Minutes`` table."""
    lines = ['<table border="1">', _header(["Block", "Total Minutes"]), "<tbody>"]
    for block, minutes in summary.items():
        lines.append(f"<tr><td>{_h(block)}</td><td>{minutes}</td></tr>")
    lines.extend(["</tbody>", "</table>"])
    return "\n".join(lines)


def render_document_html(text: str, config: GridConfig | None = None) -> str:
    """Compile YAML ``text`` and return the grid and summary tables.

    Any :class:`ScheduleError` is rendered as a single ``<p>`` message instead of a partial
    table.
    """
    try:
        result = compile_schedule(parse_document(text), config)
    except ScheduleError as exc:
        return f'<p class="error">Invalid schedule: {_h(exc.message)}</p>'
    return render_grid_html(result.grid) + "\n" + render_summary_html(result.summary)
