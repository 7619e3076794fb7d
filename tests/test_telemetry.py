from pathlib import Path

import pytest

from weekgrid.core.errors import InvalidRangeError
from weekgrid.scenario.io import parse_document
from weekgrid.scheduling import compile_schedule
from weekgrid.telemetry import CompileRunLogger, append_jsonl, read_jsonl


def test_append_jsonl_creates_parents(tmp_path: Path):
    path = tmp_path / "nested" / "runs.jsonl"
    append_jsonl(path, {"a": 1})
    append_jsonl(path, {"b": 2})
    assert read_jsonl(path) == [{"a": 1}, {"b": 2}]


def test_logger_records_successful_compile(tmp_path: Path, school_week_yaml):
    log_path = tmp_path / "compile.jsonl"
    with CompileRunLogger(log_path=log_path, source="week.yaml", config={"interval": 15}) as logger:
        result = compile_schedule(parse_document(school_week_yaml))
        logger.finalize(result)

    (record,) = read_jsonl(log_path)
    assert record["record_type"] == "compile"
    assert record["status"] == "ok"
    assert record["source"] == "week.yaml"
    assert record["metrics"] == {
        "rows": 11,
        "invariant_rows": 1,
        "blocks": 3,
        "total_minutes": 240,
    }
    assert record["config"] == {"interval": 15}
    assert record["error"] is None


def test_logger_records_schedule_error(tmp_path: Path):
    log_path = tmp_path / "compile.jsonl"
    with pytest.raises(InvalidRangeError):
        with CompileRunLogger(log_path=log_path):
            compile_schedule({"Start": "9:00 AM", "End": "8:00 AM"})

    (record,) = read_jsonl(log_path)
    assert record["status"] == "error"
    assert record["error"]["kind"] == "invalid_range"
    assert record["error"]["field"] == "End"
