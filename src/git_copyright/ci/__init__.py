# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""CI/CD integration: process exit codes."""

from git_copyright.ci.exit_codes import CheckExitCode, error_to_exit_code, report_to_exit_code

__all__ = ["CheckExitCode", "error_to_exit_code", "report_to_exit_code"]
