# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Comment delimiters for a file type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class LeftOnly:
    """Line comment, e.g. ``#`` or ``//``."""

    left: str


@dataclass(frozen=True)
class Enclosing:
    """Block comment wrapped by two delimiters, e.g. ``/*`` and ``*/``."""

    left: str
    right: str


CommentSign: TypeAlias = LeftOnly | Enclosing


def parse_comment_sign(value: object) -> CommentSign:
    """Build a comment sign from its configuration shape.

    A string is a line comment; a two-element list is an enclosing pair.
    """
    if isinstance(value, LeftOnly | Enclosing):
        return value
    if isinstance(value, str):
        if not value:
            raise ValueError("comment sign must not be empty")
        return LeftOnly(value)
    if isinstance(value, list | tuple) and len(value) == 2 and all(
        isinstance(v, str) and v for v in value
    ):
        return Enclosing(value[0], value[1])
    raise ValueError(
        f"comment sign must be a string or a pair of strings, got {value!r}"
    )
