"""Pydantic models describing a weekly schedule document."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, model_validator

from weekgrid.core.errors import DocumentShapeError, MalformedTimeError, ScheduleError

CALENDAR_DAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

_SECTION_LABELS = {"start": "Start", "end": "End", "invariants": "Invariants", "colors": "Colors"}


class Entry(BaseModel):
    """One scheduled occurrence of a block.

    Attributes
    ----------
    block_name:
        Block label (``Block`` in documents); also the ``Colors`` and summary key.
    start / end:
        Raw time-of-day text, converted to minutes by the compiler.
    time_text:
        Original ``Time: "8:00 AM - 8:30 AM"`` range text when the entry was written that way.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    block_name: str = Field(
        validation_alias=AliasChoices("block_name", "Block", "block", "blockName", "name")
    )
    start: str = Field(validation_alias=AliasChoices("start", "Start"))
    end: str = Field(validation_alias=AliasChoices("end", "End"))
    time_text: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _split_time_range(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        has_bounds = any(key in data for key in ("start", "Start", "end", "End"))
        time_value = data.get("Time", data.get("time"))
        if has_bounds or time_value is None:
            return data
        if not isinstance(time_value, str):
            raise MalformedTimeError(f"Invalid time range: {time_value!r}", raw=repr(time_value))
        parts = [part.strip() for part in time_value.split("-")]
        if len(parts) != 2 or not all(parts):
            raise MalformedTimeError(f"Invalid time range: {time_value}", raw=time_value)
        merged = dict(data)
        merged["start"], merged["end"] = parts
        merged["time_text"] = time_value.strip()
        return merged

    @property
    def label(self) -> str:
        return self.time_text or f"{self.start} - {self.end}"


class ScheduleDocument(BaseModel):
    """Parsed weekly schedule: window, per-day entries, invariants and colour overrides.

    Documents are usually written with capitalised top-level keys (``Start``, ``End``,
    ``Colors``, ``Invariants``) and one key per weekday; a nested ``days`` mapping and
    lower-case keys are accepted as well. Unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    start: str
    end: str
    days: dict[str, list[Entry]] = Field(default_factory=dict)
    invariants: list[Entry] = Field(default_factory=list)
    colors: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _collect_sections(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        normalised: dict[str, Any] = {}
        days: dict[str, Any] = {}
        for key, value in data.items():
            lowered = str(key).lower()
            if lowered in _SECTION_LABELS:
                normalised.setdefault(lowered, value)
            elif lowered in CALENDAR_DAYS:
                days.setdefault(str(key), value)
        nested = data.get("days", data.get("Days"))
        if isinstance(nested, Mapping):
            for key, value in nested.items():
                days.setdefault(str(key), value)
        normalised["days"] = {day: entries or [] for day, entries in days.items()}
        if normalised.get("invariants") is None:
            normalised["invariants"] = []
        colors = normalised.get("colors")
        if colors is None:
            normalised["colors"] = {}
        elif isinstance(colors, Mapping):
            # Colours are cosmetic: blank values fall back to defaults, scalars become text.
            normalised["colors"] = {
                str(block): str(color)
                for block, color in colors.items()
                if isinstance(color, (str, int, float)) and str(color).strip()
            }
        return normalised

    @classmethod
    def from_mapping(cls, data: Any) -> ScheduleDocument:
        """Validate the parser's nested structure, translating failures into ``ScheduleError``."""
        if isinstance(data, cls):
            return data
        if not isinstance(data, Mapping):
            raise DocumentShapeError(
                f"Schedule document must be a mapping (got {type(data).__name__})",
                raw=repr(data),
            )
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise _translate_validation_error(exc) from exc

    def entries_for(self, day: str) -> list[Entry]:
        """Return entries for ``day`` matching the key case-insensitively."""
        wanted = day.lower()
        for key, entries in self.days.items():
            if key.lower() == wanted:
                return entries
        return []

    def day_key(self, day: str) -> str:
        wanted = day.lower()
        return next((key for key in self.days if key.lower() == wanted), day)


def _format_loc(loc: tuple[int | str, ...]) -> str:
    parts = list(loc)
    if parts and parts[0] == "days":
        parts = parts[1:]
    path = ""
    for part in parts:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            label = _SECTION_LABELS.get(str(part), str(part)) if not path else str(part)
            path += f".{label}" if path else label
    return path


def _translate_validation_error(exc: ValidationError) -> ScheduleError:
    error = exc.errors()[0]
    field = _format_loc(tuple(error["loc"])) or None
    cause = (error.get("ctx") or {}).get("error")
    if isinstance(cause, ScheduleError):
        prefix = f"{field}: " if field and field not in cause.message else ""
        return type(cause)(
            f"{prefix}{cause.message}", field=field or cause.field, raw=cause.raw
        )
    if error["type"] == "missing":
        return DocumentShapeError(f"Missing required field: {field}", field=field)
    raw = error.get("input")
    return DocumentShapeError(
        f"Invalid value for {field or 'document'}: {error['msg']}",
        field=field,
        raw=None if raw is None else repr(raw),
    )


__all__ = ["CALENDAR_DAYS", "Entry", "ScheduleDocument"]
