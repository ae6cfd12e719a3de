# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Async wrappers around the git subcommands the runner needs."""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Protocol

from git_copyright.core.exceptions import FileIOError, GitCommandError

logger = logging.getLogger("git_copyright.vcs.git")

GIT = "git"


class HistoryProvider(Protocol):
    """Anything that can tell the copyright years of a file."""

    async def years_for(self, filepath: Path) -> str: ...


async def _run_git(
    repo_path: str | Path, *args: str, phase: str, nul_separated: bool = False
) -> list[str]:
    """Run ``git <args>`` in *repo_path* and return the non-empty output records.

    Records are lines, or NUL-terminated entries for commands run with ``-z``.
    """
    try:
        proc = await asyncio.create_subprocess_exec(
            GIT,
            *args,
            cwd=str(repo_path),
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await proc.communicate()
    except OSError as exc:
        raise FileIOError(phase, exc) from exc

    if proc.returncode != 0:
        raise GitCommandError(stderr.decode("utf-8", errors="replace").strip())

    try:
        output = stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise GitCommandError(f"output of git {args[0]} is not valid UTF-8: {exc}") from exc
    separator = "\0" if nul_separated else "\n"
    return [record for record in output.split(separator) if record]


async def ensure_git_available() -> str:
    """Return the git version string, raising if git cannot be run."""
    try:
        lines = await _run_git(".", "--version", phase="probing git")
    except FileIOError as exc:
        raise GitCommandError(f"git executable not available: {exc.cause}") from exc
    version = lines[0] if lines else "git"
    logger.debug("Using %s", version)
    return version


async def list_tracked_files(repo_path: str | Path, ref_name: str = "HEAD") -> list[str]:
    """All tracked files on a git reference, relative to the repository root."""
    return await _run_git(
        repo_path,
        "ls-tree",
        "-r",
        "-z",
        ref_name,
        "--name-only",
        phase="getting files on ref",
        nul_separated=True,
    )


async def list_changed_files(repo_path: str | Path) -> list[str]:
    """Tracked files with uncommitted working-tree changes."""
    return await _run_git(
        repo_path, "diff", "-z", "--name-only", phase="checking for diffs", nul_separated=True
    )


def current_year() -> str:
    return datetime.now(UTC).strftime("%Y")


def collapse_commit_years(commit_years: list[str], filepath: str | Path = "") -> str:
    """Collapse commit years (newest first) into ``YYYY`` or ``added-lastModified``."""
    match len(commit_years):
        case 0:
            logger.debug("File %s is untracked, add current year", filepath)
            return current_year()
        case 1:
            logger.debug("File %s was only committed once", filepath)
            return commit_years[0]
        case num_commits:
            logger.debug("File %s was modified %d times", filepath, num_commits)
            last_modified = commit_years[0]
            added = commit_years[-1]
            return added if added == last_modified else f"{added}-{last_modified}"


class GitHistoryProvider:
    """Copyright years of files from ``git log``, following renames."""

    def __init__(self, repo_path: str | Path) -> None:
        self.repo_path = Path(repo_path)

    async def commit_years(self, filepath: Path) -> list[str]:
        lines = await _run_git(
            self.repo_path,
            "log",
            "--follow",
            "-m",
            "--pretty=%ci",
            "--",
            str(filepath),
            phase="reading file history",
        )
        # %ci starts with the four-digit year
        return [line[:4] for line in lines]

    async def years_for(self, filepath: Path) -> str:
        return collapse_commit_years(await self.commit_years(filepath), filepath)
