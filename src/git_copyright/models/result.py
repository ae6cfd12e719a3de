# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Per-file and per-run results of a copyright check."""

from __future__ import annotations

from dataclasses import dataclass, field

from git_copyright.core.constants import FileOutcome
from git_copyright.core.exceptions import CopyrightError


@dataclass(frozen=True)
class ExistingCopyright:
    """A copyright line found in the header of a file."""

    line: int
    years: str


@dataclass(frozen=True)
class FileCheckResult:
    filename: str
    outcome: FileOutcome
    years: str
    previous_years: str | None = None
    line: int | None = None


@dataclass
class RunReport:
    """Aggregated outcome of checking a repository."""

    results: list[FileCheckResult] = field(default_factory=list)
    errors: list[CopyrightError] = field(default_factory=list)
    duration_ms: int = 0

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def checked(self) -> int:
        return len(self.results)

    @property
    def updated(self) -> list[FileCheckResult]:
        return [r for r in self.results if r.outcome == FileOutcome.UPDATED]

    @property
    def added(self) -> list[FileCheckResult]:
        return [r for r in self.results if r.outcome == FileOutcome.ADDED]

    @property
    def unchanged(self) -> list[FileCheckResult]:
        return [r for r in self.results if r.outcome == FileOutcome.UNCHANGED]

    @property
    def first_error(self) -> CopyrightError | None:
        return self.errors[0] if self.errors else None

    def raise_for_errors(self) -> None:
        """Raise the first collected error, if any."""
        if self.errors:
            raise self.errors[0]

    def summary(self) -> dict[str, int]:
        return {
            "checked": self.checked,
            "unchanged": len(self.unchanged),
            "updated": len(self.updated),
            "added": len(self.added),
            "errors": len(self.errors),
        }
