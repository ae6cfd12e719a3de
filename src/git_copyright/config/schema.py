# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Schema of the repository configuration file."""

from __future__ import annotations

from fnmatch import fnmatchcase

from pydantic import BaseModel, ConfigDict, field_validator

from git_copyright.models.comment import CommentSign, parse_comment_sign


class CopyrightConfig(BaseModel):
    """Comment sign per file type plus files and directories to skip.

    Immutable once loaded; shared read-only by all workers of a run.
    """

    model_config = ConfigDict(frozen=True)

    comment_sign_map: dict[str, CommentSign]
    ignore_files: list[str]
    ignore_dirs: list[str]

    @field_validator("comment_sign_map", mode="before")
    @classmethod
    def _parse_comment_signs(cls, v: object) -> dict[str, CommentSign]:
        if not isinstance(v, dict):
            raise ValueError("comment_sign_map must be a mapping")
        return {str(key): parse_comment_sign(sign) for key, sign in v.items()}

    @property
    def glob_patterns(self) -> list[str]:
        return [*self.ignore_files, *self.ignore_dirs]

    def is_ignored(self, filename: str) -> bool:
        """Return True if *filename* matches any ignore pattern."""
        return any(fnmatchcase(filename, pattern) for pattern in self.glob_patterns)
