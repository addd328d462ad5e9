# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich rendering of lint reports and health probes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..core.models import DiagnosticRecord, LintReport, LintStatus
from ..core.serialization import dumps, serialize_report
from ..core.severity import Severity
from ..core.text import LineIndexedText
from ..linting.health import HealthReport, HealthState
from .annotations import AnnotationStyle, build_annotations

_STYLE_COLOURS: Final[dict[AnnotationStyle, str]] = {
    AnnotationStyle.ERROR: "bold red",
    AnnotationStyle.WARNING: "yellow",
    AnnotationStyle.WEAK_WARNING: "dim",
}
_SEVERITY_COLOURS: Final[dict[Severity, str]] = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
    Severity.INFO: "cyan",
}
_EXCERPT_WIDTH: Final[int] = 60


def _excerpt(text: LineIndexedText, record: DiagnosticRecord) -> str:
    if record.range is None:
        return "-"
    snippet = text.text[record.range.start : record.range.end].strip()
    if len(snippet) > _EXCERPT_WIDTH:
        return f"{snippet[: _EXCERPT_WIDTH - 1]}…"
    return snippet


def build_report_table(path: str, text: LineIndexedText, report: LintReport) -> Table:
    """Return a table listing every diagnostic in ``report``.

    Rows whose range can be painted on the current text are styled by their
    annotation; the remaining rows are listed without a span.

    Args:
        path: Display path of the linted document.
        text: Indexed document text that was linted.
        report: Outcome of the lint pass.

    Returns:
        Table: Rich table ready for printing.
    """

    painted = {id(item.record): item for item in build_annotations(report.diagnostics, text.text_length)}
    table = Table(title=Text(path), box=box.SIMPLE, expand=True)
    table.add_column("Line", justify="right", style="bold")
    table.add_column("Span")
    table.add_column("Severity")
    table.add_column("Code")
    table.add_column("Message", overflow="fold")
    table.add_column("Source", overflow="ellipsis")
    for record in report.diagnostics:
        annotation = painted.get(id(record))
        span = f"{annotation.range.start}-{annotation.range.end}" if annotation else "-"
        row_style = _STYLE_COLOURS[annotation.style] if annotation else None
        severity_colour = _SEVERITY_COLOURS.get(record.severity, "white")
        table.add_row(
            str(record.line),
            span,
            f"[{severity_colour}]{record.severity.value}[/]",
            record.code or "-",
            Text(record.message),
            Text(_excerpt(text, record)),
            style=row_style,
        )
    return table


def render_lint_result(console: Console, path: str, text: LineIndexedText, report: LintReport) -> None:
    """Print the diagnostics of one document.

    Args:
        console: Destination console.
        path: Display path of the linted document.
        text: Indexed document text that was linted.
        report: Outcome of the lint pass.
    """

    if report.status is LintStatus.CLEAN:
        console.print(f"[green]{escape(path)}: no issues[/green]")
        return
    if not report.ran:
        console.print(f"[red]{escape(path)}: hadolint did not run ({report.status.value})[/red]")
        return
    console.print(build_report_table(path, text, report))


def render_summary(console: Console, reports: Sequence[LintReport]) -> None:
    """Print a one-line total across several lint reports."""

    counts = {severity: 0 for severity in Severity}
    for report in reports:
        for record in report.diagnostics:
            counts[record.severity] += 1
    total = sum(counts.values())
    parts = ", ".join(f"{counts[severity]} {severity.value}" for severity in Severity)
    colour = "red" if counts[Severity.ERROR] else ("yellow" if total else "green")
    console.print(f"[{colour}]{len(reports)} file(s) checked, {total} issue(s): {parts}[/{colour}]")


def render_json(results: Sequence[tuple[str, LintReport]]) -> str:
    """Return lint results as an indented JSON array, one object per document.

    Args:
        results: Display path and report of every linted document, in order.

    Returns:
        str: JSON text built from the pydantic dumps of each report.
    """

    return dumps([serialize_report(report, path=path) for path, report in results])


def render_health(console: Console, report: HealthReport, candidates: Sequence[str]) -> None:
    """Print the candidate table and the outcome of a health probe.

    Args:
        console: Destination console.
        report: Outcome of the version probe.
        candidates: Candidate paths checked for the current platform.
    """

    table = Table(title="Candidate locations", box=box.SIMPLE, expand=True)
    table.add_column("#", justify="right")
    table.add_column("Path", overflow="fold")
    table.add_column("Selected")
    for position, candidate in enumerate(candidates, start=1):
        selected = "[green]yes[/green]" if candidate == report.executable else "-"
        table.add_row(str(position), candidate, selected)
    console.print(table)

    border = {
        HealthState.HEALTHY: "green",
        HealthState.UNHEALTHY: "yellow",
        HealthState.MISSING: "red",
    }[report.state]
    console.print(Panel(Text(report.summary()), title="hadolint", border_style=border))


__all__ = ["build_report_table", "render_health", "render_json", "render_lint_result", "render_summary"]
