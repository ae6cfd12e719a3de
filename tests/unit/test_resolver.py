# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for resolving comment signs from file names."""

from __future__ import annotations

import pytest

from git_copyright.copyright.resolver import CommentStyleResolver, resolution_key
from git_copyright.core.exceptions import UnknownCommentSignError
from git_copyright.models.comment import Enclosing, LeftOnly


@pytest.fixture
def resolver() -> CommentStyleResolver:
    return CommentStyleResolver(
        {
            "py": LeftOnly("#"),
            "css": Enclosing("/*", "*/"),
            "gz": LeftOnly("?"),
            "Makefile": LeftOnly("#"),
            "Dockerfile": LeftOnly("#"),
            ".gitignore": LeftOnly("#"),
        }
    )


@pytest.mark.parametrize(
    ("filename", "key"),
    [
        ("main.py", "py"),
        ("src/pkg/module.py", "py"),
        ("Makefile", "Makefile"),
        ("docker/Dockerfile", "Dockerfile"),
        ("archive.tar.gz", "gz"),
        (".gitignore", ".gitignore"),
        ("dir.d/README", "README"),
    ],
)
def test_resolution_key(filename: str, key: str) -> None:
    assert resolution_key(filename) == key


class TestCommentStyleResolver:
    def test_extension_first(self, resolver: CommentStyleResolver) -> None:
        assert resolver.resolve("app/main.py") == LeftOnly("#")
        assert resolver.resolve("static/site.css") == Enclosing("/*", "*/")

    def test_falls_back_to_file_name(self, resolver: CommentStyleResolver) -> None:
        assert resolver.resolve("Makefile") == LeftOnly("#")
        assert resolver.resolve("build/Dockerfile") == LeftOnly("#")
        assert resolver.resolve(".gitignore") == LeftOnly("#")

    def test_unknown_raises(self, resolver: CommentStyleResolver) -> None:
        with pytest.raises(UnknownCommentSignError) as exc_info:
            resolver.resolve("notes.xyz")
        assert exc_info.value.filename == "notes.xyz"
        assert "please update the configuration" in str(exc_info.value)

    def test_extension_does_not_fall_back_to_name(self) -> None:
        resolver = CommentStyleResolver({"Makefile.am": LeftOnly("#")})
        with pytest.raises(UnknownCommentSignError):
            resolver.resolve("Makefile.am")

    def test_contains(self, resolver: CommentStyleResolver) -> None:
        assert "x.py" in resolver
        assert "x.rs" not in resolver
