# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Domain models for git-copyright."""

from git_copyright.models.comment import CommentSign, Enclosing, LeftOnly, parse_comment_sign
from git_copyright.models.result import ExistingCopyright, FileCheckResult, RunReport

__all__ = [
    "CommentSign",
    "Enclosing",
    "ExistingCopyright",
    "FileCheckResult",
    "LeftOnly",
    "RunReport",
    "parse_comment_sign",
]
