# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Comment resolution, copyright patterns, and content rewriting."""

from git_copyright.copyright.patterns import PatternCache, generate_copyright_line
from git_copyright.copyright.resolver import CommentStyleResolver
from git_copyright.copyright.rewriter import find_existing_copyright, updated_content

__all__ = [
    "CommentStyleResolver",
    "PatternCache",
    "find_existing_copyright",
    "generate_copyright_line",
    "updated_content",
]
