# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Load the repository configuration from YAML.

Without a custom path the default configuration shipped inside the package
is used.
"""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path

import yaml
from pydantic import ValidationError

from git_copyright.config.schema import CopyrightConfig
from git_copyright.core.exceptions import ConfigParseError, FileIOError

logger = logging.getLogger("git_copyright.config.loader")

_DEFAULT_CONFIG = "default_config.yaml"


def parse_config(text: str) -> CopyrightConfig:
    """Parse configuration *text*, raising :class:`ConfigParseError`."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigParseError(str(exc)) from exc

    if not isinstance(data, dict):
        raise ConfigParseError(
            f"expected a mapping at top level, got {type(data).__name__}"
        )

    try:
        return CopyrightConfig(**data)
    except ValidationError as exc:
        raise ConfigParseError(str(exc)) from exc


def load_default_config() -> CopyrightConfig:
    text = resources.files("git_copyright").joinpath(_DEFAULT_CONFIG).read_text(
        encoding="utf-8"
    )
    return parse_config(text)


def load_config(config_path: str | Path | None = None) -> CopyrightConfig:
    """Load the configuration at *config_path*, or the default one."""
    if config_path is None:
        logger.info("Using default configuration")
        return load_default_config()

    logger.info("Using config %s", config_path)
    try:
        text = Path(config_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileIOError("reading config", exc, config_path) from exc
    return parse_config(text)
