# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""File selection and async reading/writing of repository files."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import aiofiles

from git_copyright.config.schema import CopyrightConfig
from git_copyright.core.exceptions import FileIOError

logger = logging.getLogger("git_copyright.copyright.files")


def filter_files(
    config: CopyrightConfig,
    files: Iterable[str],
    repo_path: str | Path = ".",
) -> list[str]:
    """Drop ignored files and paths that are not regular files in the repo."""
    root = Path(repo_path)
    selected: list[str] = []
    for filename in files:
        if config.is_ignored(filename):
            logger.debug("Ignoring %s", filename)
            continue
        if not (root / filename).is_file():
            logger.debug("Skipping %s, not a regular file", filename)
            continue
        selected.append(filename)
    return selected


async def read_file(path: Path) -> str:
    # newline="" keeps line endings untouched
    try:
        async with aiofiles.open(path, encoding="utf-8", newline="") as fh:
            return await fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileIOError("reading file", exc, path) from exc


async def write_file(path: Path, content: str) -> None:
    try:
        async with aiofiles.open(path, "w", encoding="utf-8", newline="") as fh:
            await fh.write(content)
    except OSError as exc:
        raise FileIOError("writing file with copyright", exc, path) from exc
