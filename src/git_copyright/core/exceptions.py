# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Exception hierarchy for git-copyright.

Per-file failures are carried as values on the runner's error queue and
aggregated into the run report; setup failures are raised directly.
"""

from __future__ import annotations

from pathlib import Path


class CopyrightError(Exception):
    """Base exception for all git-copyright errors."""


class FilesChangedError(CopyrightError):
    """Rewriting produced working-tree changes and the run asked to fail on them."""

    def __init__(self, files: list[str] | None = None) -> None:
        self.files = list(files or [])
        super().__init__("The copyright of some files have changed")


class FileIOError(CopyrightError):
    """I/O failure during one phase of the run."""

    def __init__(
        self,
        phase: str,
        cause: BaseException | str,
        path: str | Path | None = None,
    ) -> None:
        self.phase = phase
        self.cause = cause
        self.path = str(path) if path is not None else None
        super().__init__(f"I/O error while {phase}: {cause}")


class GitCommandError(CopyrightError):
    """A git subcommand could not be run or exited non-zero."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Failed to run git subcommand: {detail}")


class ConfigParseError(CopyrightError):
    """The configuration file is not valid YAML or does not match the schema."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Failed to parse config: {detail}")


class UnknownCommentSignError(CopyrightError):
    """No comment sign is configured for a file."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__(
            f"No comment sign found for file {filename}, please update the configuration"
        )


class FileCheckError(CopyrightError):
    """Unexpected failure while checking one file."""

    def __init__(self, filename: str, cause: BaseException) -> None:
        self.filename = filename
        self.cause = cause
        super().__init__(f"Unexpected error while checking {filename}: {cause!r}")
