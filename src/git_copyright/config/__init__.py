# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Repository configuration: comment signs and ignore patterns."""

from git_copyright.config.loader import load_config, load_default_config
from git_copyright.config.schema import CopyrightConfig

__all__ = ["CopyrightConfig", "load_config", "load_default_config"]
