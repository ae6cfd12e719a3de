# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Enumerations and defaults shared across the engine."""

from enum import StrEnum


class FileOutcome(StrEnum):
    UNCHANGED = "unchanged"
    UPDATED = "updated"
    ADDED = "added"


class RunnerState(StrEnum):
    IDLE = "idle"
    DISTRIBUTING = "distributing"
    DRAINING = "draining"
    DONE = "done"


YEARS_PLACEHOLDER = "{years}"

# Only the first lines of a file are searched for an existing copyright.
HEADER_LINES = 3

SHEBANG = "#!"

DEFAULT_TEMPLATE = "Copyright {years} DummyCorp. All rights reserved."
DEFAULT_REF = "HEAD"
DEFAULT_QUEUE_SIZE = 64
