# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Runtime settings via environment variables and .env files."""

import os

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from git_copyright.core.constants import DEFAULT_QUEUE_SIZE, DEFAULT_REF


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GIT_COPYRIGHT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"  # "text" or "json"

    # Runner
    workers: int = 0  # 0 means one worker per CPU
    queue_size: int = DEFAULT_QUEUE_SIZE
    ref_name: str = DEFAULT_REF

    @field_validator("log_format", mode="before")
    @classmethod
    def _normalize_log_format(cls, v: object) -> str:
        if isinstance(v, str) and v.strip().lower() == "json":
            return "json"
        return "text"

    @field_validator("workers")
    @classmethod
    def _non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("must not be negative")
        return v

    @field_validator("queue_size")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be at least 1")
        return v

    @property
    def worker_count(self) -> int:
        return self.workers or os.cpu_count() or 1


def get_settings() -> Settings:
    return Settings()
