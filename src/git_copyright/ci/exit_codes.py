# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Standardized exit codes for CI/CD pipeline integrations.

Exit codes:
    0: OK, every file checked, no errors
    1: FILE_ERRORS, one or more files could not be checked or fixed
    2: SETUP_ERROR, configuration or git failure before processing files
    3: FILES_CHANGED, copyrights were updated and --fail-on-changes was set
"""

from __future__ import annotations

from enum import IntEnum

from git_copyright.core.exceptions import (
    ConfigParseError,
    CopyrightError,
    FileIOError,
    FilesChangedError,
    GitCommandError,
)
from git_copyright.models.result import RunReport


class CheckExitCode(IntEnum):
    """Exit codes used by git-copyright."""

    OK = 0
    FILE_ERRORS = 1
    SETUP_ERROR = 2
    FILES_CHANGED = 3


def error_to_exit_code(error: CopyrightError) -> CheckExitCode:
    """Map an error that aborted the run to an exit code."""
    if isinstance(error, FilesChangedError):
        return CheckExitCode.FILES_CHANGED
    if isinstance(error, ConfigParseError | GitCommandError):
        return CheckExitCode.SETUP_ERROR
    if isinstance(error, FileIOError) and error.phase in {
        "reading config",
        "probing git",
        "getting files on ref",
        "checking for diffs",
    }:
        return CheckExitCode.SETUP_ERROR
    return CheckExitCode.FILE_ERRORS


def report_to_exit_code(report: RunReport) -> CheckExitCode:
    return CheckExitCode.OK if report.ok else CheckExitCode.FILE_ERRORS
