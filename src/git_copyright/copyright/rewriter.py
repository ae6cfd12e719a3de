# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Locate and rewrite the copyright line in file content. No I/O."""

from __future__ import annotations

import re

from git_copyright.core.constants import HEADER_LINES, SHEBANG
from git_copyright.models.result import ExistingCopyright


def find_existing_copyright(
    content: str,
    pattern: re.Pattern[str],
    header_lines: int = HEADER_LINES,
) -> ExistingCopyright | None:
    """Return the first copyright line among the first *header_lines* lines."""
    for line_idx, line in enumerate(content.split("\n")[:header_lines]):
        match = pattern.match(line.removesuffix("\r"))
        if match:
            return ExistingCopyright(line=line_idx, years=match.group("years"))
    return None


def updated_content(content: str, copyright_line: str, line_idx: int | None = None) -> str:
    """Return *content* with *copyright_line* added or updated.

    With *line_idx* the line at that index is replaced. Otherwise the line is
    inserted after a shebang, or on top followed by a blank line.
    """
    if line_idx is not None:
        lines = content.split("\n")
        if not 0 <= line_idx < len(lines):
            raise IndexError(f"line index {line_idx} out of range for {len(lines)} lines")
        # Keep CRLF files consistent
        ending = "\r" if lines[line_idx].endswith("\r") else ""
        lines[line_idx] = copyright_line + ending
        return "\n".join(lines)

    if content.startswith(SHEBANG):
        shebang, sep, rest = content.partition("\n")
        if not sep:
            return f"{shebang}\n{copyright_line}"
        ending = "\r" if shebang.endswith("\r") else ""
        return f"{shebang}\n{copyright_line}{ending}\n{rest}"

    return f"{copyright_line}\n\n{content}"
