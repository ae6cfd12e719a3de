# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rich console output for run reports."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from git_copyright.config.schema import CopyrightConfig
from git_copyright.core.constants import FileOutcome
from git_copyright.core.exceptions import CopyrightError
from git_copyright.models.comment import Enclosing, LeftOnly
from git_copyright.models.result import RunReport

console = Console()

OUTCOME_COLORS = {
    FileOutcome.UNCHANGED: "dim",
    FileOutcome.UPDATED: "yellow",
    FileOutcome.ADDED: "cyan",
}


def format_report(report: RunReport) -> None:
    """Print the files whose copyright was touched, then the errors."""
    for result in sorted(report.results, key=lambda r: r.filename):
        if result.outcome == FileOutcome.UPDATED:
            console.print(
                f"File [bold]{escape(result.filename)}[/bold] has copyright with year(s) "
                f"{result.previous_years} on line {result.line} but should have {result.years}",
                style=OUTCOME_COLORS[result.outcome],
                highlight=False,
            )
        elif result.outcome == FileOutcome.ADDED:
            console.print(
                f"File [bold]{escape(result.filename)}[/bold] has no copyright but should have {result.years}",
                style=OUTCOME_COLORS[result.outcome],
                highlight=False,
            )

    if report.errors:
        console.print("Encountered errors while checking copyrights:", style="bold red")
        for error in report.errors:
            console.print(f"  {error}", style="red", highlight=False, markup=False)


def format_summary(report: RunReport) -> None:
    duration = report.duration_ms / 1000
    if report.ok:
        console.print(f"Copyrights checked and updated in {duration:0.3f}s", style="bold green")
    else:
        console.print(
            f"Failed to check repo copyright ({duration:0.3f}s): {report.first_error}",
            style="bold red",
            markup=False,
        )

    counts = report.summary()
    console.print(
        f"{counts['checked']} checked, {counts['unchanged']} unchanged, "
        f"{counts['updated']} updated, {counts['added']} added, {counts['errors']} errors",
        style="dim",
    )


def format_run_failure(error: CopyrightError, duration_ms: int) -> None:
    console.print(
        f"Failed to check repo copyright ({duration_ms / 1000:0.3f}s): {error}",
        style="bold red",
        markup=False,
    )


def format_changes(changed: list[str]) -> None:
    if not changed:
        return
    console.print("The following files have changed:")
    for filename in changed:
        console.print(f"- {filename}", highlight=False, markup=False)


def format_error(error: CopyrightError) -> None:
    console.print(str(error), style="bold red", markup=False)


def format_config(config: CopyrightConfig) -> None:
    table = Table(title="Comment Signs")
    table.add_column("Extension / File", style="cyan", no_wrap=True)
    table.add_column("Left", style="bold")
    table.add_column("Right")

    for key in sorted(config.comment_sign_map, key=str.lower):
        match config.comment_sign_map[key]:
            case LeftOnly(left):
                table.add_row(key, left, "-")
            case Enclosing(left, right):
                table.add_row(key, left, right)
    console.print(table)

    ignore_table = Table(title="Ignore Patterns")
    ignore_table.add_column("Kind", style="bold")
    ignore_table.add_column("Pattern", style="cyan")
    for pattern in config.ignore_files:
        ignore_table.add_row("file", pattern)
    for pattern in config.ignore_dirs:
        ignore_table.add_row("dir", pattern)
    console.print(ignore_table)
