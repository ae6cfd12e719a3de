# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Version control queries."""

from git_copyright.vcs.git import (
    GitHistoryProvider,
    HistoryProvider,
    collapse_commit_years,
    ensure_git_available,
    list_changed_files,
    list_tracked_files,
)

__all__ = [
    "GitHistoryProvider",
    "HistoryProvider",
    "collapse_commit_years",
    "ensure_git_available",
    "list_changed_files",
    "list_tracked_files",
]
