# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Check and fix the copyright of a single file."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path

from git_copyright.copyright.files import read_file, write_file
from git_copyright.copyright.patterns import PatternCache
from git_copyright.copyright.resolver import CommentStyleResolver
from git_copyright.copyright.rewriter import find_existing_copyright, updated_content
from git_copyright.core.constants import FileOutcome
from git_copyright.core.exceptions import CopyrightError, FileCheckError
from git_copyright.models.result import FileCheckResult
from git_copyright.vcs.git import HistoryProvider

logger = logging.getLogger("git_copyright.runner.worker")

# Marks the end of the work queue for one worker.
STOP = None


@dataclass(frozen=True)
class WorkerContext:
    """Read-only collaborators shared by all workers of a run."""

    repo_path: Path
    resolver: CommentStyleResolver
    patterns: PatternCache
    history: HistoryProvider


async def check_file(filename: str, ctx: WorkerContext) -> FileCheckResult:
    """Bring the copyright of *filename* in line with its history.

    Raises :class:`CopyrightError` on failure; the file is left untouched
    unless the new content was computed completely.
    """
    comment_sign = ctx.resolver.resolve(filename)
    pattern = ctx.patterns.get_pattern(comment_sign)
    tracked_years = await ctx.history.years_for(Path(filename))

    filepath = ctx.repo_path / filename
    content = await read_file(filepath)
    existing = find_existing_copyright(content, pattern)

    if existing is not None and existing.years == tracked_years:
        logger.debug("File %s has correct copyright with years %s", filepath, tracked_years)
        return FileCheckResult(
            filename=filename,
            outcome=FileOutcome.UNCHANGED,
            years=tracked_years,
            previous_years=existing.years,
            line=existing.line,
        )

    copyright_line = ctx.patterns.line_for(comment_sign, tracked_years)

    if existing is not None:
        logger.info(
            "File %s has copyright with year(s) %s on line %d but should have %s",
            filepath,
            existing.years,
            existing.line,
            tracked_years,
        )
        await write_file(filepath, updated_content(content, copyright_line, existing.line))
        return FileCheckResult(
            filename=filename,
            outcome=FileOutcome.UPDATED,
            years=tracked_years,
            previous_years=existing.years,
            line=existing.line,
        )

    logger.info("File %s has no copyright but should have %s", filepath, tracked_years)
    await write_file(filepath, updated_content(content, copyright_line))
    return FileCheckResult(filename=filename, outcome=FileOutcome.ADDED, years=tracked_years)


async def file_checker(
    worker_id: int,
    filenames: asyncio.Queue[str | None],
    errors: asyncio.Queue[CopyrightError | None],
    ctx: WorkerContext,
) -> list[FileCheckResult]:
    """Consume filenames until the stop marker, reporting errors on *errors*."""
    results: list[FileCheckResult] = []
    while True:
        filename = await filenames.get()
        if filename is STOP:
            logger.debug("Runner %d finished after %d files", worker_id, len(results))
            return results

        try:
            results.append(await check_file(filename, ctx))
        except CopyrightError as exc:
            logger.debug("Runner %d failed on %s: %s", worker_id, filename, exc)
            await errors.put(exc)
        except Exception as exc:
            logger.exception("Runner %d crashed on %s", worker_id, filename)
            await errors.put(FileCheckError(filename, exc))
