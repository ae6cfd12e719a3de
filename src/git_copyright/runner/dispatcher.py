# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Fan file checks out to a pool of workers and collect their errors.

Files flow through a bounded queue to ``N`` worker tasks; errors come back
on a second bounded queue that the dispatcher drains while it distributes.
"""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path

from git_copyright.config.schema import CopyrightConfig
from git_copyright.copyright.files import filter_files
from git_copyright.copyright.patterns import PatternCache
from git_copyright.copyright.resolver import CommentStyleResolver
from git_copyright.core.config import Settings, get_settings
from git_copyright.core.constants import RunnerState
from git_copyright.core.exceptions import CopyrightError
from git_copyright.models.result import FileCheckResult, RunReport
from git_copyright.runner.worker import STOP, WorkerContext, file_checker
from git_copyright.vcs.git import (
    GitHistoryProvider,
    HistoryProvider,
    ensure_git_available,
    list_tracked_files,
)

logger = logging.getLogger("git_copyright.runner.dispatcher")


class CopyrightRunner:
    """Check the copyrights of tracked files in a repository.

    Args:
        config: Comment signs and ignore patterns.
        repo_path: Root of the git repository.
        template: Copyright template containing ``{years}``.
        settings: Runtime settings; falls back to ``get_settings()``.
        history: Source of copyright years; defaults to ``git log``.
        patterns: Pattern cache to share; a new one is built for *template*.
        workers: Number of worker tasks; defaults to one per CPU.
    """

    def __init__(
        self,
        config: CopyrightConfig,
        repo_path: str | Path,
        template: str,
        *,
        settings: Settings | None = None,
        history: HistoryProvider | None = None,
        patterns: PatternCache | None = None,
        workers: int | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self.config = config
        self.repo_path = Path(repo_path)
        self.patterns = patterns or PatternCache(template)
        if self.patterns.template != template:
            raise ValueError("Pattern cache was built for a different template")
        self.history = history or GitHistoryProvider(self.repo_path)
        self.worker_count = workers or self._settings.worker_count
        self.queue_size = self._settings.queue_size
        self.state = RunnerState.IDLE

    def _set_state(self, state: RunnerState) -> None:
        logger.debug("Runner state %s -> %s", self.state, state)
        self.state = state

    async def collect_files(self) -> list[str]:
        """Tracked files on the configured ref that are not ignored."""
        await ensure_git_available()
        tracked = await list_tracked_files(self.repo_path, self._settings.ref_name)
        files = filter_files(self.config, tracked, self.repo_path)
        logger.info("Checking %d of %d tracked files", len(files), len(tracked))
        return files

    async def run(self, files: list[str] | None = None) -> RunReport:
        """Process every file once and return the aggregated report.

        When *files* is ``None`` the tracked files of the repository are
        listed and filtered first; failures doing so propagate.
        """
        if self.state != RunnerState.IDLE:
            raise RuntimeError(f"Runner already used (state: {self.state})")

        start = time.monotonic()
        if files is None:
            files = await self.collect_files()

        ctx = WorkerContext(
            repo_path=self.repo_path,
            resolver=CommentStyleResolver(self.config.comment_sign_map),
            patterns=self.patterns,
            history=self.history,
        )
        filenames: asyncio.Queue[str | None] = asyncio.Queue(maxsize=self.queue_size)
        error_queue: asyncio.Queue[CopyrightError | None] = asyncio.Queue(maxsize=self.queue_size)
        errors: list[CopyrightError] = []

        self._set_state(RunnerState.DISTRIBUTING)
        collector = asyncio.create_task(_collect_errors(error_queue, errors))
        runners = []
        for worker_id in range(self.worker_count):
            logger.debug("Spawning runner %d", worker_id)
            runners.append(
                asyncio.create_task(file_checker(worker_id, filenames, error_queue, ctx))
            )

        try:
            for filename in files:
                await filenames.put(filename)
                _drain_nowait(error_queue, errors)

            self._set_state(RunnerState.DRAINING)
            for _ in runners:
                await filenames.put(STOP)
            per_runner: list[list[FileCheckResult]] = await asyncio.gather(*runners)

            await error_queue.put(STOP)
            await collector
        finally:
            await _cancel_pending([*runners, collector])
        _drain_nowait(error_queue, errors)
        self._set_state(RunnerState.DONE)

        report = RunReport(
            results=[result for results in per_runner for result in results],
            errors=errors,
            duration_ms=int((time.monotonic() - start) * 1000),
        )
        logger.debug(
            "Pattern cache: %d patterns, %d hits, %d misses",
            len(self.patterns),
            self.patterns.hits,
            self.patterns.misses,
        )
        return report


async def _collect_errors(
    error_queue: asyncio.Queue[CopyrightError | None],
    errors: list[CopyrightError],
) -> None:
    """Move errors off the queue until the stop marker arrives."""
    while True:
        error = await error_queue.get()
        if error is STOP:
            return
        errors.append(error)


async def _cancel_pending(tasks: list[asyncio.Task]) -> None:
    """Cancel and reap tasks left running when a run is interrupted."""
    pending = [task for task in tasks if not task.done()]
    if not pending:
        return
    logger.warning("Cancelling %d unfinished runner tasks", len(pending))
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)


def _drain_nowait(
    error_queue: asyncio.Queue[CopyrightError | None],
    errors: list[CopyrightError],
) -> None:
    while True:
        try:
            error = error_queue.get_nowait()
        except asyncio.QueueEmpty:
            return
        if error is not STOP:
            errors.append(error)


async def check_repo_copyright(
    config: CopyrightConfig,
    repo_path: str | Path,
    template: str,
    *,
    settings: Settings | None = None,
    history: HistoryProvider | None = None,
    workers: int | None = None,
) -> RunReport:
    """Run a full check, log every error, and raise the first one.

    Returns the report when all files were processed without errors.
    """
    runner = CopyrightRunner(
        config, repo_path, template, settings=settings, history=history, workers=workers
    )
    report = await runner.run()
    if report.errors:
        logger.error("Encountered errors while checking copyrights:")
        for error in report.errors:
            logger.error("%s", error)
        report.raise_for_errors()
    return report
