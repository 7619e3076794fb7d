"""Telemetry helpers (JSONL compile-run records)."""

from .jsonl import append_jsonl, read_jsonl
from .run_logger import CompileRunLogger

__all__ = ["append_jsonl", "read_jsonl", "CompileRunLogger"]
