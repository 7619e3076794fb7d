"""Common weekgrid-specific exceptions."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    MALFORMED_TIME = "malformed_time"
    INVALID_RANGE = "invalid_range"
    DOCUMENT_SHAPE = "document_shape"


class ScheduleError(ValueError):
    """Raised when a schedule document cannot be compiled.

    Attributes
    ----------
    kind:
        Error category used by renderers to pick a message style.
    field:
        Dotted path of the offending document field (e.g. ``Monday[0].start``), when known.
    raw:
        Offending raw text as it appeared in the document, when known.
    message:
        Display-ready description; ``str(error)`` returns the same text.
    """

    kind: ErrorKind = ErrorKind.DOCUMENT_SHAPE

    def __init__(self, message: str, *, field: str | None = None, raw: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.raw = raw

    def to_dict(self) -> dict[str, str | None]:
        return {
            "kind": self.kind.value,
            "field": self.field,
            "raw": self.raw,
            "message": self.message,
        }


class MalformedTimeError(ScheduleError):
    """Raised when a time string does not match ``<h>:<mm> <AM|PM>``."""

    kind = ErrorKind.MALFORMED_TIME


class InvalidRangeError(ScheduleError):
    """Raised for empty, reversed, misaligned or overlapping time ranges."""

    kind = ErrorKind.INVALID_RANGE


class DocumentShapeError(ScheduleError):
    """Raised when the parsed document lacks required fields or has the wrong structure."""

    kind = ErrorKind.DOCUMENT_SHAPE


__all__ = [
    "ErrorKind",
    "ScheduleError",
    "MalformedTimeError",
    "InvalidRangeError",
    "DocumentShapeError",
]
