"""Grid compilation settings."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidRangeError

WEEKDAYS: tuple[str, ...] = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday")
DEFAULT_INTERVAL = 15


@dataclass(slots=True, frozen=True)
class GridConfig:
    """Row granularity, column order and fallback colours for a compiled grid.

    Attributes
    ----------
    interval:
        Minutes per grid row. Every block boundary must fall on this grid.
    days:
        Day columns in display order. Document keys are matched case-insensitively.
    default_block_color:
        Background used for day cells whose block has no ``Colors`` entry.
    default_invariant_color:
        Background used for invariant rows when neither the block nor the
        ``invariant_color_key`` entry has a colour.
    invariant_color_key:
        ``Colors`` key shared by all invariant rows.
    """

    interval: int = DEFAULT_INTERVAL
    days: tuple[str, ...] = WEEKDAYS
    default_block_color: str = "white"
    default_invariant_color: str = "lightgray"
    invariant_color_key: str = "Invariants"

    def __post_init__(self) -> None:
        if self.interval <= 0:
            raise InvalidRangeError(
                f"Grid interval must be a positive number of minutes (got {self.interval})",
                field="interval",
                raw=str(self.interval),
            )
        if not self.days:
            raise ValueError("GridConfig.days must name at least one day")
        lowered = [day.lower() for day in self.days]
        if len(set(lowered)) != len(lowered):
            raise ValueError(f"GridConfig.days contains duplicates: {list(self.days)}")


__all__ = ["GridConfig", "WEEKDAYS", "DEFAULT_INTERVAL"]
