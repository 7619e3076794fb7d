"""Context manager for capturing schedule compile telemetry."""

from __future__ import annotations

import time
from contextlib import AbstractContextManager
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping
from uuid import uuid4

from weekgrid.core.errors import ScheduleError
from weekgrid.scheduling.compiler import CompileResult

from .jsonl import append_jsonl


def _iso_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


@dataclass(slots=True)
class CompileRunLogger(AbstractContextManager["CompileRunLogger"]):
    """Record one JSONL line per schedule compile.

    Parameters
    ----------
    log_path:
        JSONL path where compile records are appended.
    source:
        Path or label of the schedule document being compiled.
    config:
        Settings used for the compile (interval, day columns).
    """

    log_path: Path
    source: str | None = None
    config: Mapping[str, Any] | None = None
    schema_version: str = "1.0"
    run_id: str = field(default_factory=lambda: uuid4().hex, init=False)
    _start_time: float = field(default=0.0, init=False)
    _start_timestamp: str | None = field(default=None, init=False)
    _closed: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.log_path = Path(self.log_path)

    def __enter__(self) -> "CompileRunLogger":
        self._start_time = time.perf_counter()
        self._start_timestamp = _iso_now()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type:
            error = exc.to_dict() if isinstance(exc, ScheduleError) else {"message": repr(exc)}
            self._close(status="error", metrics=None, warnings=None, error=error)
            return False
        self._close(status="ok", metrics=None, warnings=None, error=None)
        return False

    def finalize(self, result: CompileResult) -> None:
        """Write the terminal record for a successful compile."""
        metrics = {
            "rows": len(result.grid.rows),
            "invariant_rows": len(result.grid.invariant_rows()),
            "blocks": len(result.summary),
            "total_minutes": sum(result.summary.values()),
        }
        self._close(status="ok", metrics=metrics, warnings=list(result.warnings), error=None)

    def _close(
        self,
        *,
        status: str,
        metrics: Mapping[str, Any] | None,
        warnings: list[str] | None,
        error: Mapping[str, Any] | None,
    ) -> None:
        if self._closed:
            return
        duration = time.perf_counter() - self._start_time if self._start_time else 0.0
        record = {
            "record_type": "compile",
            "schema_version": self.schema_version,
            "run_id": self.run_id,
            "source": self.source,
            "status": status,
            "metrics": dict(metrics or {}),
            "config": dict(self.config or {}),
            "warnings": list(warnings or []),
            "error": dict(error) if error else None,
            "started_at": self._start_timestamp,
            "finished_at": _iso_now(),
            "duration_seconds": round(duration, 3),
        }
        append_jsonl(self.log_path, record)
        self._closed = True


__all__ = ["CompileRunLogger"]
