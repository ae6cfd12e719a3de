# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Generate copyright lines and the regexes that recognise them.

Regexes are compiled once per comment sign and stored in a
:class:`PatternCache` shared by all workers of a run.
"""

from __future__ import annotations

import logging
import re
import threading

from git_copyright.core.constants import YEARS_PLACEHOLDER
from git_copyright.models.comment import CommentSign, Enclosing, LeftOnly

logger = logging.getLogger("git_copyright.copyright.patterns")

# A single year or an ``added-lastModified`` range.
YEARS_REGEX = r"(?P<years>[0-9]{4}(?:-[0-9]{4})?)"
# Later placeholders must repeat the first one.
YEARS_BACKREF = r"(?P=years)"

_ESCAPED_PLACEHOLDER = re.escape(YEARS_PLACEHOLDER)


def generate_copyright_line(template: str, comment_sign: CommentSign, years: str) -> str:
    """Render *template* with *years* inside the comment delimiters.

    The template has to contain ``{years}``, e.g.
    ``Copyright (c) DummyCompany Ltd. {years}`` or
    ``Copyright {years} DummyCompany. All rights reserved.``
    """
    copyright_text = template.replace(YEARS_PLACEHOLDER, years)

    match comment_sign:
        case LeftOnly(left):
            return f"{left} {copyright_text}"
        case Enclosing(left, right):
            return f"{left} {copyright_text} {right}"
    raise TypeError(f"Unsupported comment sign: {comment_sign!r}")


def build_copyright_regex(template: str, comment_sign: CommentSign) -> str:
    """Turn *template* into an anchored regex source for *comment_sign*."""
    first, *rest = re.escape(template).split(_ESCAPED_PLACEHOLDER)
    body = first
    if rest:
        body += YEARS_REGEX + YEARS_BACKREF.join(rest)

    match comment_sign:
        case LeftOnly(left):
            return f"^{re.escape(left)} {body}$"
        case Enclosing(left, right):
            return f"^{re.escape(left)} {body} {re.escape(right)}$"
    raise TypeError(f"Unsupported comment sign: {comment_sign!r}")


def compile_copyright_pattern(template: str, comment_sign: CommentSign) -> re.Pattern[str]:
    return re.compile(build_copyright_regex(template, comment_sign))


class PatternCache:
    """Compiled copyright patterns keyed by comment sign.

    Safe to share between threads and tasks. Lookups read the dict without
    locking; a miss compiles under the lock after checking again, so each
    comment sign is compiled at most once.
    """

    def __init__(self, template: str) -> None:
        if YEARS_PLACEHOLDER not in template:
            raise ValueError(f"Copyright template must contain {YEARS_PLACEHOLDER}")
        self._template = template
        self._patterns: dict[CommentSign, re.Pattern[str]] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0
        self.compiled = 0

    @property
    def template(self) -> str:
        return self._template

    def get_pattern(self, comment_sign: CommentSign) -> re.Pattern[str]:
        pattern = self._patterns.get(comment_sign)
        if pattern is not None:
            self.hits += 1
            return pattern

        with self._lock:
            pattern = self._patterns.get(comment_sign)
            if pattern is not None:
                self.hits += 1
                return pattern

            self.misses += 1
            logger.debug("Initializing regex for comment sign %r", comment_sign)
            pattern = compile_copyright_pattern(self._template, comment_sign)
            self._patterns[comment_sign] = pattern
            self.compiled += 1
            return pattern

    def line_for(self, comment_sign: CommentSign, years: str) -> str:
        return generate_copyright_line(self._template, comment_sign, years)

    def __len__(self) -> int:
        return len(self._patterns)

    def __contains__(self, comment_sign: CommentSign) -> bool:
        return comment_sign in self._patterns
