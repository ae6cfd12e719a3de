# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

import asyncio
import time
from pathlib import Path
from typing import Annotated

import typer

from git_copyright.core.constants import DEFAULT_TEMPLATE, YEARS_PLACEHOLDER

app = typer.Typer(
    name="git-copyright",
    help="Check and update the copyright notes of a git repository",
    no_args_is_help=True,
)


@app.command()
def check(
    repo_path: Annotated[
        Path, typer.Option("--repo-path", help="Path to the repository")
    ] = Path("./"),
    copyright_template: Annotated[
        str,
        typer.Option(
            "--copyright-template",
            help=f"Template for the copyright (include `{YEARS_PLACEHOLDER}` as placeholder)",
        ),
    ] = DEFAULT_TEMPLATE,
    config_path: Annotated[
        Path | None,
        typer.Option("--config-path", help="Path to the configuration file"),
    ] = None,
    fail_on_changes: Annotated[
        bool, typer.Option("--fail-on-changes", help="Fail when copyrights were changed")
    ] = False,
    workers: Annotated[
        int | None,
        typer.Option("--workers", "-w", min=1, help="Worker count (default: one per CPU)"),
    ] = None,
) -> None:
    """Add or update copyright notes according to the git history."""
    if YEARS_PLACEHOLDER not in copyright_template:
        typer.echo(f"Copyright template must contain {YEARS_PLACEHOLDER}", err=True)
        raise typer.Exit(2)

    exit_code = asyncio.run(
        _async_check(repo_path, copyright_template, config_path, fail_on_changes, workers)
    )
    raise typer.Exit(int(exit_code))


async def _async_check(
    repo_path: Path,
    template: str,
    config_path: Path | None,
    fail_on_changes: bool,
    workers: int | None,
) -> int:
    from git_copyright.ci.exit_codes import (
        CheckExitCode,
        error_to_exit_code,
        report_to_exit_code,
    )
    from git_copyright.cli.formatters.console import (
        format_changes,
        format_error,
        format_report,
        format_run_failure,
        format_summary,
    )
    from git_copyright.config.loader import load_config
    from git_copyright.core.config import get_settings
    from git_copyright.core.exceptions import CopyrightError, FilesChangedError
    from git_copyright.core.logging import setup_logging
    from git_copyright.runner.dispatcher import CopyrightRunner
    from git_copyright.sdk import check_for_changes

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    try:
        config = load_config(config_path)
    except CopyrightError as exc:
        format_error(exc)
        return int(error_to_exit_code(exc))

    # A failed run still reports the files it already rewrote
    start = time.monotonic()
    try:
        runner = CopyrightRunner(config, repo_path, template, settings=settings, workers=workers)
        report = await runner.run()
    except CopyrightError as exc:
        format_run_failure(exc, int((time.monotonic() - start) * 1000))
        exit_code = error_to_exit_code(exc)
    else:
        format_report(report)
        format_summary(report)
        exit_code = report_to_exit_code(report)

    try:
        changed = await check_for_changes(repo_path, fail_on_changes)
    except FilesChangedError as exc:
        format_changes(exc.files)
        format_error(exc)
        return int(exit_code or CheckExitCode.FILES_CHANGED)
    except CopyrightError as exc:
        format_error(exc)
        return int(exit_code or error_to_exit_code(exc))

    format_changes(changed)
    return int(exit_code)


@app.command(name="show-config")
def show_config(
    config_path: Annotated[
        Path | None,
        typer.Option("--config-path", help="Path to the configuration file"),
    ] = None,
) -> None:
    """Show the comment signs and ignore patterns in effect."""
    from git_copyright.cli.formatters.console import format_config, format_error
    from git_copyright.config.loader import load_config
    from git_copyright.core.exceptions import CopyrightError

    try:
        config = load_config(config_path)
    except CopyrightError as exc:
        format_error(exc)
        raise typer.Exit(2) from exc
    format_config(config)


@app.command()
def version() -> None:
    """Show version information."""
    from git_copyright import __version__

    typer.echo(f"git-copyright v{__version__}")
