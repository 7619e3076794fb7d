"""Compile declarative weekly timetables into row-spanned grids."""

from weekgrid.core.config import GridConfig
from weekgrid.core.errors import (
    DocumentShapeError,
    ErrorKind,
    InvalidRangeError,
    MalformedTimeError,
    ScheduleError,
)
from weekgrid.scenario.contract import Entry, ScheduleDocument
from weekgrid.scenario.io import load_document, parse_document
from weekgrid.scheduling import (
    INTERVAL,
    Cell,
    CompileResult,
    Grid,
    InvariantRow,
    TimeRow,
    compile_schedule,
    to_minutes,
    to_text,
)

__version__ = "0.1.0"

__all__ = [
    "GridConfig",
    "ErrorKind",
    "ScheduleError",
    "MalformedTimeError",
    "InvalidRangeError",
    "DocumentShapeError",
    "Entry",
    "ScheduleDocument",
    "load_document",
    "parse_document",
    "INTERVAL",
    "Cell",
    "CompileResult",
    "Grid",
    "InvariantRow",
    "TimeRow",
    "compile_schedule",
    "to_minutes",
    "to_text",
]
