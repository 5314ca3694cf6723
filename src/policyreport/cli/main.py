"""policyreport - inspect, validate and convert policy reports."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from ..core.config import get_effective_config
from ..core.loader import ReportLoadError, export_report_json, find_report_files, load_report
from ..core.severity import filter_results, sort_by_severity
from ..core.summary import compute_summary, summary_is_consistent
from ..formatters.junit import export_junit_results
from ..formatters.markdown import generate_report_markdown
from ..models.result import Result, ResultSeverity

console = Console()

STATUS_CHOICES = [r.value for r in Result]
SEVERITY_CHOICES = [s.value for s in ResultSeverity if s.value]
STATUS_COLORS = {
    Result.PASS: "green",
    Result.FAIL: "red",
    Result.WARN: "yellow",
    Result.ERROR: "magenta",
    Result.SKIP: "dim",
}


def _load_or_exit(path: str):
    try:
        return load_report(Path(path))
    except ReportLoadError as e:
        console.print(f"  [red]ERROR[/red] {e}")
        sys.exit(11)


def _split(value: str | None) -> list[str]:
    return [v.strip().lower() for v in value.split(",") if v.strip()] if value else []


@click.group(name="policyreport")
def policyreport_cli() -> None:
    """Inspect, validate and convert policy reports."""


@policyreport_cli.command()
@click.argument("report_file", type=click.Path(exists=True, dir_okay=False))
def summary(report_file: str) -> None:
    """Print the status summary of a report."""
    report = _load_or_exit(report_file)
    computed = compute_summary(report.results)

    table = Table(title=report.get_key() or Path(report_file).name)
    table.add_column("Status")
    table.add_column("Count", justify="right")
    for status in Result:
        color = STATUS_COLORS[status]
        table.add_row(f"[{color}]{status.value}[/{color}]", str(computed.count(status)))
    table.add_row("[bold]total[/bold]", f"[bold]{computed.total}[/bold]")
    console.print(table)

    if not summary_is_consistent(report):
        console.print(
            "  [yellow]WARN[/yellow] Stored summary does not match results "
            f"(stored total {report.summary.total}, computed {computed.total})"
        )


@policyreport_cli.command()
@click.argument("report_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--min-severity", type=click.Choice(SEVERITY_CHOICES), help="Only results at or above this severity")
@click.option("--status", "-s", "statuses", multiple=True, type=click.Choice(STATUS_CHOICES), help="Status to include (repeatable)")
@click.option("--sort", "sort_results", is_flag=True, help="Most severe first")
def results(report_file: str, min_severity: str | None, statuses: tuple[str, ...], sort_results: bool) -> None:
    """List the results of a report."""
    report = _load_or_exit(report_file)
    selected = filter_results(report.results, min_severity=min_severity, statuses=statuses or None)
    if sort_results:
        selected = sort_by_severity(selected)

    for r in selected:
        name = f"{r.policy}/{r.rule}" if r.rule else r.policy
        color = STATUS_COLORS[r.result]
        console.print(
            f"  {name}  [{color}]{r.result.value}[/{color}]  "
            f"{r.severity.value or '-'}  {r.resource_string() or '-'}",
            highlight=False,
        )
    console.print(f"  {len(selected)} of {len(report.results)} results")


@policyreport_cli.command()
@click.argument("path", type=click.Path(exists=True))
def validate(path: str) -> None:
    """Validate a report file, or every report under a directory."""
    target = Path(path)
    files = find_report_files(target) if target.is_dir() else [target]
    if not files:
        console.print(f"  [yellow]WARN[/yellow] No report documents found in {target}")
        return

    failed = 0
    for f in files:
        try:
            load_report(f)
        except ReportLoadError as e:
            failed += 1
            console.print(f"  [red]ERROR[/red] {f}: {e}", highlight=False)
        else:
            console.print(f"  [green]OK[/green] {f}", highlight=False)

    if failed:
        console.print(f"  {failed} of {len(files)} documents invalid")
        sys.exit(1)


@policyreport_cli.command()
@click.argument("report_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--project", "-p", type=click.Path(exists=True, file_okay=False), default=".", help="Project path for config")
@click.option("--fail-on", type=str, help="Comma-separated failing statuses")
@click.option("--min-severity", type=click.Choice(SEVERITY_CHOICES), help="Ignore results below this severity")
def check(report_file: str, project: str, fail_on: str | None, min_severity: str | None) -> None:
    """CI gate: exit non-zero when failing results are present."""
    overrides: dict = {"check": {}}
    if fail_on:
        overrides["check"]["fail_on"] = _split(fail_on)
    if min_severity:
        overrides["check"]["min_severity"] = min_severity
    config = get_effective_config(Path(project), cli_overrides=overrides)
    check_config = config["check"]

    for status in check_config["fail_on"]:
        if status not in STATUS_CHOICES:
            console.print(f"  [red]ERROR[/red] Unknown status in fail_on: {status}")
            sys.exit(11)
    threshold = check_config.get("min_severity") or ""
    if threshold and threshold not in SEVERITY_CHOICES:
        console.print(f"  [red]ERROR[/red] Unknown min_severity: {threshold}")
        sys.exit(11)

    report = _load_or_exit(report_file)
    failing = filter_results(
        report.results,
        min_severity=threshold or None,
        statuses=check_config["fail_on"],
    )

    exit_codes = check_config["exit_codes"]
    if failing:
        console.print(f"  [red]FAIL[/red] {len(failing)} failing results")
        for r in failing:
            console.print(f"    {r.policy} {r.resource_string()}".rstrip(), highlight=False)
        sys.exit(int(exit_codes.get("fail", 1)))

    console.print("  [green]PASS[/green] No failing results")
    sys.exit(int(exit_codes.get("pass", 0)))


@policyreport_cli.command()
@click.argument("report_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--format", "-f", "output_format", type=click.Choice(["json", "junit", "markdown"]), default="json")
@click.option("--output", "-o", type=click.Path(dir_okay=False), required=True)
@click.option("--project", "-p", type=click.Path(exists=True, file_okay=False), default=".", help="Project path for config")
def export(report_file: str, output_format: str, output: str, project: str) -> None:
    """Convert a report to JSON, JUnit XML or markdown."""
    config = get_effective_config(Path(project))
    junit_fail_on = config["junit"]["fail_on"]
    for status in junit_fail_on:
        if status not in STATUS_CHOICES:
            console.print(f"  [red]ERROR[/red] Unknown status in junit.fail_on: {status}")
            sys.exit(11)
    max_results = config["markdown"]["max_results"]
    if not isinstance(max_results, int) or isinstance(max_results, bool) or max_results < 0:
        console.print(f"  [red]ERROR[/red] markdown.max_results must be a non-negative integer: {max_results}")
        sys.exit(11)

    report = _load_or_exit(report_file)
    out = Path(output)

    if output_format == "json":
        export_report_json(report, out)
    elif output_format == "junit":
        stats = export_junit_results(
            [report],
            out,
            fail_on=junit_fail_on,
            suite_name=config["junit"]["suite_name"],
        )
        console.print(f"  {stats['total_tests']} tests, {stats['failures']} failures, {stats['errors']} errors")
    else:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(
            generate_report_markdown(report, max_results=max_results),
            encoding="utf-8",
        )

    console.print(f"  [green]Wrote[/green] {out}", highlight=False)


def main() -> None:
    policyreport_cli()


if __name__ == "__main__":
    main()
