from __future__ import annotations

import json
from contextlib import nullcontext
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from weekgrid.core.config import DEFAULT_INTERVAL, GridConfig
from weekgrid.core.errors import ScheduleError
from weekgrid.evaluation import summary_dataframe
from weekgrid.reporting import grid_table, render_grid_html, render_summary_html, summary_table
from weekgrid.scenario.io import load_document
from weekgrid.scheduling import CompileResult, compile_schedule
from weekgrid.telemetry import CompileRunLogger

app = typer.Typer(add_completion=False, no_args_is_help=True, help="Weekly timetable grid tools.")
console = Console()

ScheduleArg = Annotated[
    Path,
    typer.Argument(exists=True, dir_okay=False, readable=True, help="Path to schedule YAML."),
]
IntervalOpt = Annotated[
    int,
    typer.Option("--interval", min=1, help="Minutes per grid row."),
]


def _compile(
    schedule_path: Path,
    interval: int,
    telemetry_log: Path | None = None,
) -> CompileResult:
    """Compile ``schedule_path`` or print the error and exit with status 1."""
    config = GridConfig(interval=interval)
    logger = (
        CompileRunLogger(
            log_path=telemetry_log,
            source=str(schedule_path),
            config={"interval": config.interval, "days": list(config.days)},
        )
        if telemetry_log
        else nullcontext()
    )
    try:
        with logger:
            result = compile_schedule(load_document(schedule_path), config)
            if isinstance(logger, CompileRunLogger):
                logger.finalize(result)
    except ScheduleError as exc:
        console.print(f"[bold red]Invalid schedule[/]: {exc.message}")
        raise typer.Exit(1)
    return result


def _print_warnings(result: CompileResult) -> None:
    if result.warnings:
        console.print("[yellow]Warnings:[/]\n- " + "\n- ".join(result.warnings))


@app.command("render")
def render(
    schedule_path: ScheduleArg,
    interval: IntervalOpt = DEFAULT_INTERVAL,
    html_out: Annotated[
        Path | None,
        typer.Option("--html", help="Optional path to write the grid and summary as HTML tables."),
    ] = None,
    summary_csv: Annotated[
        Path | None,
        typer.Option("--summary-csv", help="Optional path to write block totals as CSV."),
    ] = None,
    telemetry_log: Annotated[
        Path | None,
        typer.Option("--telemetry-log", help="Append a compile record to this JSONL file."),
    ] = None,
) -> None:
    """Compile a schedule and print the weekly grid plus block totals."""
    result = _compile(schedule_path, interval, telemetry_log)
    console.print(grid_table(result.grid))
    console.print(summary_table(result.summary))
    _print_warnings(result)

    if html_out:
        html_out.parent.mkdir(parents=True, exist_ok=True)
        html_out.write_text(
            render_grid_html(result.grid) + "\n" + render_summary_html(result.summary),
            encoding="utf-8",
        )
        console.print(f"Wrote HTML tables to {html_out}")

    if summary_csv:
        summary_csv.parent.mkdir(parents=True, exist_ok=True)
        summary_dataframe(result.summary).to_csv(summary_csv, index=False)
        console.print(f"Wrote block totals to {summary_csv}")


@app.command("summary")
def summary(
    schedule_path: ScheduleArg,
    interval: IntervalOpt = DEFAULT_INTERVAL,
    as_json: Annotated[bool, typer.Option("--json", help="Print totals as JSON.")] = False,
) -> None:
    """Print total scheduled minutes per block."""
    result = _compile(schedule_path, interval)
    if as_json:
        typer.echo(json.dumps(result.summary, indent=2))
        return
    console.print(summary_table(result.summary))


@app.command("check")
def check(
    schedule_path: ScheduleArg,
    interval: IntervalOpt = DEFAULT_INTERVAL,
) -> None:
    """Validate a schedule without printing the grid."""
    result = _compile(schedule_path, interval)
    grid = result.grid
    console.print(
        f"[bold green]Schedule OK[/]: {len(grid.rows)} rows "
        f"({len(grid.invariant_rows())} invariant), {len(result.summary)} blocks"
    )
    _print_warnings(result)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
