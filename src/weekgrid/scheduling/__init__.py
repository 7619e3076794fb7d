"""Scheduling utilities (clock arithmetic, grid model, timetable compiler)."""

from .clock import format_range, to_minutes, to_text
from .compiler import INTERVAL, CompileResult, Occurrence, compile_schedule
from .grid import Cell, Grid, InvariantRow, Row, TimeRow

__all__ = [
    "to_minutes",
    "to_text",
    "format_range",
    "INTERVAL",
    "CompileResult",
    "Occurrence",
    "compile_schedule",
    "Cell",
    "Grid",
    "InvariantRow",
    "Row",
    "TimeRow",
]
