# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

from __future__ import annotations

import asyncio
import os
import shutil
import subprocess
from pathlib import Path

import pytest

from git_copyright.config.schema import CopyrightConfig
from git_copyright.core.config import Settings
from git_copyright.core.exceptions import GitCommandError
from git_copyright.models.comment import Enclosing, LeftOnly

TEMPLATE = "Copyright {years} Acme."

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


class FakeHistory:
    """In-memory history provider keyed by repo-relative filename."""

    def __init__(
        self,
        years: dict[str, str] | None = None,
        default: str = "2024",
        failing: set[str] | None = None,
    ) -> None:
        self.years = years or {}
        self.default = default
        self.failing = failing or set()
        self.calls: list[str] = []

    async def years_for(self, filepath: Path) -> str:
        name = filepath.as_posix()
        self.calls.append(name)
        # Yield so workers interleave
        await asyncio.sleep(0)
        if name in self.failing:
            raise GitCommandError(f"fatal: no history for {name}")
        return self.years.get(name, self.default)


@pytest.fixture
def config() -> CopyrightConfig:
    return CopyrightConfig(
        comment_sign_map={
            "py": LeftOnly("#"),
            "sh": LeftOnly("#"),
            "rs": LeftOnly("//"),
            "css": Enclosing("/*", "*/"),
            "Makefile": LeftOnly("#"),
        },
        ignore_files=["*.md"],
        ignore_dirs=["vendor/*"],
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(workers=2, queue_size=4)


@pytest.fixture
def history() -> FakeHistory:
    return FakeHistory()


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    root = tmp_path / "repo"
    root.mkdir()
    return root


def write(root: Path, filename: str, content: str) -> Path:
    path = root / filename
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content.encode("utf-8"))
    return path


def read(root: Path, filename: str) -> str:
    return (root / filename).read_bytes().decode("utf-8")


def git(root: Path, *args: str, date: str | None = None) -> str:
    """Run git in *root* with a fixed identity and optional commit date."""
    env = {
        "GIT_AUTHOR_NAME": "Test",
        "GIT_AUTHOR_EMAIL": "test@example.com",
        "GIT_COMMITTER_NAME": "Test",
        "GIT_COMMITTER_EMAIL": "test@example.com",
        "GIT_CONFIG_NOSYSTEM": "1",
        "HOME": str(root),
        "PATH": os.environ.get("PATH", ""),
    }
    if date is not None:
        env["GIT_AUTHOR_DATE"] = date
        env["GIT_COMMITTER_DATE"] = date
    result = subprocess.run(
        ["git", "-c", "commit.gpgsign=false", *args],
        cwd=root,
        env=env,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


@pytest.fixture
def git_repo(repo: Path) -> Path:
    git(repo, "init", "-q")
    return repo
