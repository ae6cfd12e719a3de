# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Map file names to comment signs."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import PurePosixPath

from git_copyright.core.exceptions import UnknownCommentSignError
from git_copyright.models.comment import CommentSign


def resolution_key(filename: str) -> str:
    """Return the lookup key for *filename*.

    The extension without its dot, or the bare file name when the file has
    no extension (``Makefile``, ``Dockerfile``, ``.gitignore``).
    """
    path = PurePosixPath(filename)
    return path.suffix[1:] if path.suffix else path.name


class CommentStyleResolver:
    """Extension-first, then whole-file-name lookup of comment signs."""

    def __init__(self, comment_sign_map: Mapping[str, CommentSign]) -> None:
        self._map = dict(comment_sign_map)

    def resolve(self, filename: str) -> CommentSign:
        try:
            return self._map[resolution_key(filename)]
        except KeyError:
            raise UnknownCommentSignError(filename) from None

    def __contains__(self, filename: str) -> bool:
        return resolution_key(filename) in self._map
