"""Schedule document loading utilities (YAML text or files)."""

from __future__ import annotations

from pathlib import Path

import yaml

from weekgrid.core.errors import DocumentShapeError
from weekgrid.scenario.contract.models import ScheduleDocument

__all__ = ["parse_document", "load_document"]


def parse_document(text: str) -> ScheduleDocument:
    """Parse YAML ``text`` into a validated :class:`ScheduleDocument`.

    Raises
    ------
    DocumentShapeError
        If the text is not valid YAML, is empty, or does not describe a mapping with
        ``Start`` and ``End``.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        where = f" (line {mark.line + 1}, column {mark.column + 1})" if mark is not None else ""
        problem = getattr(exc, "problem", None) or str(exc)
        raise DocumentShapeError(f"Invalid YAML{where}: {problem}", raw=text) from exc
    if data is None:
        raise DocumentShapeError("Schedule document is empty", raw=text)
    return ScheduleDocument.from_mapping(data)


def load_document(path: str | Path) -> ScheduleDocument:
    """Load a schedule document from a YAML file."""
    yaml_path = Path(path)
    try:
        with yaml_path.open("r", encoding="utf-8") as handle:
            text = handle.read()
    except UnicodeDecodeError as exc:
        raise DocumentShapeError(
            f"Schedule file {yaml_path} is not valid UTF-8 text", raw=str(yaml_path)
        ) from exc
    return parse_document(text)
