"""12-hour clock text <-> minutes-past-midnight conversion."""

from __future__ import annotations

import re

from weekgrid.core.errors import InvalidRangeError, MalformedTimeError

MINUTES_PER_DAY = 24 * 60

_TIME_RE = re.compile(r"(?P<hours>\d{1,2}):(?P<minutes>\d{2})\s+(?P<period>AM|PM)", re.IGNORECASE)


def to_minutes(text: object, *, field: str | None = None) -> int:
    """Parse ``"8:00 AM"``-style text into minutes past midnight.

    ``12:00 AM`` is 0 and ``12:00 PM`` is 720. Hours must be 1-12 and minutes 00-59.

    Raises
    ------
    MalformedTimeError
        If ``text`` is not a string matching ``<h>:<mm> <AM|PM>``.
    """
    raw = text if isinstance(text, str) else repr(text)
    match = _TIME_RE.fullmatch(text.strip()) if isinstance(text, str) else None
    if match is None:
        raise MalformedTimeError(f"Invalid time format: {raw}", field=field, raw=raw)
    hours = int(match.group("hours"))
    minutes = int(match.group("minutes"))
    if not 1 <= hours <= 12 or minutes > 59:
        raise MalformedTimeError(f"Invalid time format: {raw}", field=field, raw=raw)
    hours %= 12
    if match.group("period").upper() == "PM":
        hours += 12
    return hours * 60 + minutes


def to_text(minutes: int) -> str:
    """Format minutes past midnight as zero-padded ``"HH:MM AM"`` text."""
    if not 0 <= minutes < MINUTES_PER_DAY:
        raise InvalidRangeError(
            f"Minutes past midnight must be within [0, {MINUTES_PER_DAY - 1}] (got {minutes})",
            raw=str(minutes),
        )
    hours, mins = divmod(minutes, 60)
    period = "AM" if hours < 12 else "PM"
    display = hours % 12 or 12
    return f"{display:02d}:{mins:02d} {period}"


def format_range(start: int, end: int) -> str:
    return f"{to_text(start)} - {to_text(end)}"


__all__ = ["MINUTES_PER_DAY", "to_minutes", "to_text", "format_range"]
