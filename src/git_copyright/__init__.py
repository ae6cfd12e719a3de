# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""git-copyright - keep copyright notes in sync with the git history."""

__version__ = "0.3.1"

from git_copyright.sdk import (
    check_file,
    check_for_changes,
    check_repo,
    check_repo_copyright,
    check_repo_copyright_sync,
)

__all__ = [
    "__version__",
    "check_file",
    "check_for_changes",
    "check_repo",
    "check_repo_copyright",
    "check_repo_copyright_sync",
]
