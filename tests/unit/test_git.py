# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for the git wrappers with a faked subprocess layer."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import pytest

from git_copyright.core.exceptions import FileIOError, GitCommandError
from git_copyright.vcs import git as git_ops
from git_copyright.vcs.git import (
    GitHistoryProvider,
    collapse_commit_years,
    ensure_git_available,
    list_changed_files,
    list_tracked_files,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class _FakeProcess:
    def __init__(self, stdout: bytes = b"", stderr: bytes = b"", returncode: int = 0) -> None:
        self._stdout = stdout
        self._stderr = stderr
        self.returncode = returncode

    async def communicate(self) -> tuple[bytes, bytes]:
        return self._stdout, self._stderr


@pytest.fixture
def fake_git(monkeypatch):
    """Replace subprocess creation; returns the list of recorded calls."""
    calls: list[dict] = []
    state: dict = {"process": _FakeProcess(), "error": None}

    async def _fake_exec(*args, **kwargs):
        calls.append({"args": args, "cwd": kwargs.get("cwd")})
        if state["error"] is not None:
            raise state["error"]
        return state["process"]

    monkeypatch.setattr(git_ops.asyncio, "create_subprocess_exec", _fake_exec)
    calls_state = {"calls": calls, "state": state}
    return calls_state


# ---------------------------------------------------------------------------
# Year collapsing
# ---------------------------------------------------------------------------


class TestCollapseCommitYears:
    def test_multiple_years(self) -> None:
        assert collapse_commit_years(["2023", "2021", "2019"]) == "2019-2023"

    def test_single_year(self) -> None:
        assert collapse_commit_years(["2022"]) == "2022"

    def test_no_history_uses_current_year(self) -> None:
        assert collapse_commit_years([]) == str(datetime.now(UTC).year)

    def test_same_year_collapses(self) -> None:
        assert collapse_commit_years(["2021", "2021", "2021"]) == "2021"


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------


class TestGitHistoryProvider:
    async def test_years_for(self, fake_git) -> None:
        fake_git["state"]["process"] = _FakeProcess(
            stdout=b"2023-05-01 10:00:00 +0000\n2021-01-02 10:00:00 +0000\n2019-03-04 10:00:00 +0000\n"
        )
        provider = GitHistoryProvider("/repo")
        assert await provider.years_for(Path("src/main.py")) == "2019-2023"

        call = fake_git["calls"][0]
        assert call["args"][:5] == ("git", "log", "--follow", "-m", "--pretty=%ci")
        assert call["args"][-1] == "src/main.py"
        assert call["cwd"] == "/repo"

    async def test_untracked_file(self, fake_git) -> None:
        provider = GitHistoryProvider("/repo")
        assert await provider.years_for(Path("new.py")) == str(datetime.now(UTC).year)

    async def test_non_zero_exit(self, fake_git) -> None:
        fake_git["state"]["process"] = _FakeProcess(stderr=b"fatal: bad revision\n", returncode=128)
        with pytest.raises(GitCommandError, match="fatal: bad revision"):
            await GitHistoryProvider("/repo").years_for(Path("x.py"))


class TestListFiles:
    async def test_tracked_files(self, fake_git) -> None:
        fake_git["state"]["process"] = _FakeProcess(stdout=b"Makefile\0src/main.py\0")
        assert await list_tracked_files("/repo", "HEAD") == ["Makefile", "src/main.py"]
        assert fake_git["calls"][0]["args"] == ("git", "ls-tree", "-r", "-z", "HEAD", "--name-only")

    async def test_tracked_files_with_unusual_names(self, fake_git) -> None:
        fake_git["state"]["process"] = _FakeProcess(
            stdout="café.py\0docs/naïve notes.sh\0tab\there.py\0".encode()
        )
        assert await list_tracked_files("/repo") == ["café.py", "docs/naïve notes.sh", "tab\there.py"]

    async def test_tracked_files_failure(self, fake_git) -> None:
        fake_git["state"]["process"] = _FakeProcess(stderr=b"not a git repository", returncode=128)
        with pytest.raises(GitCommandError) as exc_info:
            await list_tracked_files("/repo")
        assert str(exc_info.value) == "Failed to run git subcommand: not a git repository"

    async def test_invalid_utf8_output(self, fake_git) -> None:
        fake_git["state"]["process"] = _FakeProcess(stdout=b"\xff\xfe\n")
        with pytest.raises(GitCommandError, match="UTF-8"):
            await list_tracked_files("/repo")

    async def test_launch_failure_is_io_error(self, fake_git) -> None:
        fake_git["state"]["error"] = FileNotFoundError("git")
        with pytest.raises(FileIOError) as exc_info:
            await list_changed_files("/repo")
        assert exc_info.value.phase == "checking for diffs"

    async def test_changed_files(self, fake_git) -> None:
        fake_git["state"]["process"] = _FakeProcess(stdout="a.py\0über.rs\0".encode())
        assert await list_changed_files("/repo") == ["a.py", "über.rs"]
        assert fake_git["calls"][0]["args"] == ("git", "diff", "-z", "--name-only")


class TestEnsureGitAvailable:
    async def test_available(self, fake_git) -> None:
        fake_git["state"]["process"] = _FakeProcess(stdout=b"git version 2.43.0\n")
        assert await ensure_git_available() == "git version 2.43.0"

    async def test_missing_binary(self, fake_git) -> None:
        fake_git["state"]["error"] = FileNotFoundError("No such file or directory: 'git'")
        with pytest.raises(GitCommandError, match="not available"):
            await ensure_git_available()
