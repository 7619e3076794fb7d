"""Compile a schedule document into a row-spanned weekly grid and per-block totals."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from weekgrid.core.config import DEFAULT_INTERVAL, GridConfig
from weekgrid.core.errors import InvalidRangeError
from weekgrid.scenario.contract.models import Entry, ScheduleDocument

from .clock import format_range, to_minutes, to_text
from .grid import Cell, Grid, InvariantRow, Row, TimeRow

__all__ = [
    "INTERVAL",
    "Occurrence",
    "CompileResult",
    "compile_schedule",
]

INTERVAL = DEFAULT_INTERVAL


@dataclass(slots=True, frozen=True)
class Occurrence:
    """A validated entry expressed in minutes past midnight."""

    block_name: str
    start: int
    end: int
    label: str
    field: str

    @property
    def duration(self) -> int:
        return self.end - self.start

    def overlaps(self, other: Occurrence) -> bool:
        return self.start < other.end and other.start < self.end


@dataclass(slots=True, frozen=True)
class CompileResult:
    """Output of :func:`compile_schedule`.

    Attributes
    ----------
    grid:
        Ordered rows ready for a table renderer.
    summary:
        Block name to total scheduled minutes across the week. Shadowed day entries are
        still counted.
    warnings:
        Human-readable notes about entries that were counted but not drawn, or skipped
        because they start outside the schedule window.
    """

    grid: Grid
    summary: dict[str, int]
    warnings: tuple[str, ...] = ()


class _CursorState(Enum):
    SCANNING = "scanning"
    WITHIN_INVARIANT = "within_invariant"


def compile_schedule(
    document: ScheduleDocument | Mapping[str, Any],
    config: GridConfig | None = None,
) -> CompileResult:
    """Compile ``document`` into a :class:`Grid` and block-minute summary.

    Parameters
    ----------
    document:
        Either a validated :class:`ScheduleDocument` or the raw nested mapping returned by a
        YAML/JSON parser.
    config:
        Row interval, day columns and fallback colours. Defaults to 15-minute rows over
        Monday-Friday.

    Returns
    -------
    CompileResult
        Freshly built grid, summary and warnings; nothing refers back into ``document``.

    Raises
    ------
    MalformedTimeError
        A time string does not match ``<h>:<mm> <AM|PM>``.
    InvalidRangeError
        The window is reversed, or an entry is empty, misaligned, not a whole number of
        intervals, runs past the window end, or overlaps another entry.
    DocumentShapeError
        ``Start``/``End`` are missing or a section has the wrong structure.
    """
    config = config or GridConfig()
    doc = ScheduleDocument.from_mapping(document)
    interval = config.interval

    window_start = to_minutes(doc.start, field="Start")
    window_end = to_minutes(doc.end, field="End")
    if window_end < window_start:
        raise InvalidRangeError(
            f"Schedule End ({doc.end}) must not be before Start ({doc.start})",
            field="End",
            raw=doc.end,
        )

    warnings: list[str] = []
    window = (window_start, window_end)
    invariants = _resolve_entries(doc.invariants, "Invariants", window, interval, warnings)
    _ensure_disjoint(invariants)
    by_day: dict[str, list[Occurrence]] = {}
    for day in config.days:
        occurrences = _resolve_entries(
            doc.entries_for(day), doc.day_key(day), window, interval, warnings
        )
        _ensure_disjoint(occurrences)
        _check_invariant_collisions(day, occurrences, invariants, warnings)
        by_day[day] = occurrences

    invariant_slots = {occ.start: occ for occ in invariants}
    day_slots = {day: {occ.start: occ for occ in occs} for day, occs in by_day.items()}
    summary = _accumulate_summary(window, interval, config.days, day_slots, invariant_slots)
    rows = _emit_rows(doc, config, window, day_slots, invariant_slots)

    grid = Grid(
        days=tuple(config.days),
        interval=interval,
        start_minutes=window_start,
        end_minutes=window_end,
        rows=tuple(rows),
    )
    return CompileResult(grid=grid, summary=summary, warnings=tuple(warnings))


def _resolve_entries(
    entries: Sequence[Entry],
    section: str,
    window: tuple[int, int],
    interval: int,
    warnings: list[str],
) -> list[Occurrence]:
    window_start, window_end = window
    resolved: list[Occurrence] = []
    for index, entry in enumerate(entries):
        field = f"{section}[{index}]"
        start = to_minutes(entry.start, field=f"{field}.start")
        end = to_minutes(entry.end, field=f"{field}.end")
        duration = end - start
        if duration <= 0:
            raise InvalidRangeError(
                f"{field} ({entry.block_name}): end {entry.end} must be after start {entry.start}",
                field=field,
                raw=entry.label,
            )
        if duration % interval:
            raise InvalidRangeError(
                f"{field} ({entry.block_name}): duration of {duration} minutes is not a "
                f"multiple of the {interval}-minute interval",
                field=field,
                raw=entry.label,
            )
        if start < window_start or start >= window_end:
            warnings.append(
                f"{field} ({entry.block_name}) starts outside "
                f"{format_range(window_start, window_end)} and was skipped"
            )
            continue
        if (start - window_start) % interval:
            raise InvalidRangeError(
                f"{field} ({entry.block_name}): start {entry.start} is not aligned to the "
                f"{interval}-minute grid",
                field=f"{field}.start",
                raw=entry.start,
            )
        if end > window_end:
            raise InvalidRangeError(
                f"{field} ({entry.block_name}): end {entry.end} runs past the schedule End",
                field=f"{field}.end",
                raw=entry.end,
            )
        resolved.append(
            Occurrence(
                block_name=entry.block_name,
                start=start,
                end=end,
                label=entry.label,
                field=field,
            )
        )
    return resolved


def _ensure_disjoint(occurrences: Sequence[Occurrence]) -> None:
    ordered = sorted(occurrences, key=lambda occ: (occ.start, occ.end))
    for previous, current in zip(ordered, ordered[1:]):
        if current.start < previous.end:
            raise InvalidRangeError(
                f"{current.field} ({current.block_name} {current.label}) overlaps "
                f"{previous.field} ({previous.block_name} {previous.label})",
                field=current.field,
                raw=current.label,
            )


def _check_invariant_collisions(
    day: str,
    occurrences: Sequence[Occurrence],
    invariants: Sequence[Occurrence],
    warnings: list[str],
) -> None:
    for occ in occurrences:
        for invariant in invariants:
            if not occ.overlaps(invariant):
                continue
            if occ.start == invariant.start:
                # Same boundary: the invariant row wins and the day entry is only counted.
                warnings.append(
                    f"{occ.field} ({occ.block_name}) is hidden by invariant "
                    f"{invariant.block_name} on {day}; its minutes are still counted"
                )
                continue
            raise InvalidRangeError(
                f"{occ.field} ({occ.block_name} {occ.label}) overlaps invariant "
                f"{invariant.block_name} ({invariant.label})",
                field=occ.field,
                raw=occ.label,
            )


def _boundaries(window: tuple[int, int], interval: int) -> range:
    return range(window[0], window[1], interval)


def _accumulate_summary(
    window: tuple[int, int],
    interval: int,
    days: Sequence[str],
    day_slots: Mapping[str, Mapping[int, Occurrence]],
    invariant_slots: Mapping[int, Occurrence],
) -> dict[str, int]:
    summary: dict[str, int] = {}
    for minutes in _boundaries(window, interval):
        recorded = [day_slots[day].get(minutes) for day in days]
        recorded.append(invariant_slots.get(minutes))
        for occ in recorded:
            if occ is not None:
                summary[occ.block_name] = summary.get(occ.block_name, 0) + occ.duration
    return summary


def _emit_rows(
    doc: ScheduleDocument,
    config: GridConfig,
    window: tuple[int, int],
    day_slots: Mapping[str, Mapping[int, Occurrence]],
    invariant_slots: Mapping[int, Occurrence],
) -> list[Row]:
    interval = config.interval
    window_end = window[1]
    rows: list[Row] = []
    cursor = window[0]
    state = _CursorState.SCANNING
    resume_at = cursor

    while cursor < window_end:
        if state is _CursorState.WITHIN_INVARIANT:
            cursor = resume_at
            state = _CursorState.SCANNING
            continue

        invariant = invariant_slots.get(cursor)
        if invariant is not None:
            color = (
                doc.colors.get(invariant.block_name)
                or doc.colors.get(config.invariant_color_key)
                or config.default_invariant_color
            )
            rows.append(
                InvariantRow(
                    label=invariant.label,
                    block_name=invariant.block_name,
                    duration_slots=invariant.duration // interval,
                    color=color,
                    minutes=cursor,
                )
            )
            resume_at = invariant.end
            state = _CursorState.WITHIN_INVARIANT
            continue

        cells: dict[str, Cell | None] = {}
        for day in config.days:
            occ = day_slots[day].get(cursor)
            cells[day] = (
                None
                if occ is None
                else Cell(
                    block_name=occ.block_name,
                    row_span_slots=occ.duration // interval,
                    color=doc.colors.get(occ.block_name) or config.default_block_color,
                )
            )
        rows.append(TimeRow(label=to_text(cursor), minutes=cursor, cells=cells))
        cursor += interval
    return rows
