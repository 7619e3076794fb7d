"""Core utilities shared across weekgrid modules."""

from .config import DEFAULT_INTERVAL, WEEKDAYS, GridConfig
from .errors import (
    DocumentShapeError,
    ErrorKind,
    InvalidRangeError,
    MalformedTimeError,
    ScheduleError,
)

__all__ = [
    "GridConfig",
    "WEEKDAYS",
    "DEFAULT_INTERVAL",
    "ErrorKind",
    "ScheduleError",
    "MalformedTimeError",
    "InvalidRangeError",
    "DocumentShapeError",
]
