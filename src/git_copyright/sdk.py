# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Public SDK interface for embedding git-copyright in other tools.

Usage::

    from git_copyright import check_repo, check_repo_copyright_sync

    # Async, returns the full report
    report = await check_repo(".", "Copyright {years} Acme.")
    print(report.summary())

    # Synchronous, raises the first error
    check_repo_copyright_sync(".", "Copyright {years} Acme.")
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from git_copyright.config.loader import load_config
from git_copyright.config.schema import CopyrightConfig
from git_copyright.copyright.patterns import PatternCache
from git_copyright.copyright.resolver import CommentStyleResolver
from git_copyright.core.config import Settings
from git_copyright.core.constants import DEFAULT_TEMPLATE
from git_copyright.core.exceptions import FilesChangedError
from git_copyright.models.result import FileCheckResult, RunReport
from git_copyright.runner import dispatcher
from git_copyright.runner.dispatcher import CopyrightRunner
from git_copyright.runner.worker import WorkerContext
from git_copyright.runner.worker import check_file as _check_file
from git_copyright.vcs.git import GitHistoryProvider, HistoryProvider, list_changed_files

logger = logging.getLogger("git_copyright.sdk")


def _resolve_config(config: CopyrightConfig | str | Path | None) -> CopyrightConfig:
    if isinstance(config, CopyrightConfig):
        return config
    return load_config(config)


# ---------------------------------------------------------------------------
# Public async API
# ---------------------------------------------------------------------------


async def check_repo(
    repo_path: str | Path = ".",
    template: str = DEFAULT_TEMPLATE,
    *,
    config: CopyrightConfig | str | Path | None = None,
    settings: Settings | None = None,
    history: HistoryProvider | None = None,
    workers: int | None = None,
) -> RunReport:
    """Check all tracked files and return the report without raising.

    Parameters
    ----------
    repo_path:
        Root of the git repository.
    template:
        Copyright template containing ``{years}``.
    config:
        A loaded configuration, a path to a YAML file, or ``None`` for the
        embedded default.
    settings:
        Optional ``Settings`` override.
    history:
        Optional source of copyright years; defaults to ``git log``.
    workers:
        Number of worker tasks; defaults to one per CPU.
    """
    runner = CopyrightRunner(
        _resolve_config(config),
        repo_path,
        template,
        settings=settings,
        history=history,
        workers=workers,
    )
    return await runner.run()


async def check_repo_copyright(
    repo_path: str | Path = ".",
    template: str = DEFAULT_TEMPLATE,
    *,
    config: CopyrightConfig | str | Path | None = None,
    settings: Settings | None = None,
    history: HistoryProvider | None = None,
    workers: int | None = None,
) -> RunReport:
    """Check all tracked files, raising the first error if any occurred."""
    return await dispatcher.check_repo_copyright(
        _resolve_config(config),
        repo_path,
        template,
        settings=settings,
        history=history,
        workers=workers,
    )


async def check_file(
    filename: str,
    repo_path: str | Path = ".",
    template: str = DEFAULT_TEMPLATE,
    *,
    config: CopyrightConfig | str | Path | None = None,
    history: HistoryProvider | None = None,
) -> FileCheckResult:
    """Check and fix a single file given relative to *repo_path*."""
    cfg = _resolve_config(config)
    ctx = WorkerContext(
        repo_path=Path(repo_path),
        resolver=CommentStyleResolver(cfg.comment_sign_map),
        patterns=PatternCache(template),
        history=history or GitHistoryProvider(repo_path),
    )
    return await _check_file(filename, ctx)


async def check_for_changes(repo_path: str | Path = ".", fail_on_changes: bool = False) -> list[str]:
    """Return files with working-tree changes.

    Raises :class:`FilesChangedError` when *fail_on_changes* is set and any
    file changed.
    """
    changed = await list_changed_files(repo_path)
    if changed:
        logger.info("%d files have changed", len(changed))
        if fail_on_changes:
            raise FilesChangedError(changed)
    return changed


# ---------------------------------------------------------------------------
# Public sync wrappers
# ---------------------------------------------------------------------------


def check_repo_copyright_sync(
    repo_path: str | Path = ".",
    template: str = DEFAULT_TEMPLATE,
    *,
    config: CopyrightConfig | str | Path | None = None,
    settings: Settings | None = None,
    history: HistoryProvider | None = None,
    workers: int | None = None,
) -> RunReport:
    """Synchronous wrapper around :func:`check_repo_copyright`.

    Calls ``asyncio.run()`` internally, so it must **not** be called from
    within an already-running event loop.
    """
    return asyncio.run(
        check_repo_copyright(
            repo_path,
            template,
            config=config,
            settings=settings,
            history=history,
            workers=workers,
        )
    )
