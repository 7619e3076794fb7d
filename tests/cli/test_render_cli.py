import json
from pathlib import Path

import pandas as pd
from typer.testing import CliRunner

from weekgrid.cli.main import app
from weekgrid.telemetry import read_jsonl


def test_render_exports(tmp_path: Path, school_week_path: Path) -> None:
    runner = CliRunner()
    html_path = tmp_path / "out" / "week.html"
    csv_path = tmp_path / "out" / "totals.csv"
    log_path = tmp_path / "telemetry" / "compile.jsonl"

    result = runner.invoke(
        app,
        [
            "render",
            str(school_week_path),
            "--html",
            str(html_path),
            "--summary-csv",
            str(csv_path),
            "--telemetry-log",
            str(log_path),
        ],
        prog_name="weekgrid",
    )

    assert result.exit_code == 0, result.output
    assert "Recess" in result.output

    html = html_path.read_text(encoding="utf-8")
    assert 'rowspan="8"' in html
    assert "<th>Block</th>" in html

    totals = pd.read_csv(csv_path)
    assert totals["block"].tolist() == ["French", "Math", "Recess"]
    assert totals["total_minutes"].tolist() == [120, 90, 30]

    (record,) = read_jsonl(log_path)
    assert record["status"] == "ok"


def test_summary_json(school_week_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["summary", str(school_week_path), "--json"], prog_name="weekgrid")

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"French": 120, "Math": 90, "Recess": 30}


def test_check_reports_counts(school_week_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["check", str(school_week_path)], prog_name="weekgrid")

    assert result.exit_code == 0, result.output
    assert "Schedule OK" in result.output
    assert "11 rows" in result.output


def test_invalid_schedule_exits_with_message(tmp_path: Path) -> None:
    bad = tmp_path / "bad.yaml"
    bad.write_text(
        "Start: 8:00 AM\nEnd: 9:00 AM\nMonday:\n  - Block: Art\n    Time: 13:70 XM - 9:00 AM\n",
        encoding="utf-8",
    )
    log_path = tmp_path / "compile.jsonl"
    runner = CliRunner()
    result = runner.invoke(
        app, ["render", str(bad), "--telemetry-log", str(log_path)], prog_name="weekgrid"
    )

    assert result.exit_code == 1
    assert "Invalid schedule" in result.output
    assert "13:70 XM" in result.output
    assert "Weekly Schedule" not in result.output

    (record,) = read_jsonl(log_path)
    assert record["status"] == "error"
    assert record["error"]["kind"] == "malformed_time"


def test_non_utf8_schedule_exits_with_message(tmp_path: Path) -> None:
    bad = tmp_path / "bad.yaml"
    bad.write_bytes(b"- Block: \xff\xfe")
    runner = CliRunner()
    result = runner.invoke(app, ["check", str(bad)], prog_name="weekgrid")

    assert result.exit_code == 1
    assert "Invalid schedule" in result.output
    assert "UTF-8" in result.output
