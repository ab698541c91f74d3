# File: recombinator/app/core/config.py
# Version: v0.2.0
"""
Centralized settings using Pydantic Settings.

Controls:
- App metadata (shown in the CLI banner / --version)
- Default log level
- Default FASTA line width for output
- Expected-output size above which the CLI warns before enumerating

Every field can be overridden from the environment with the RECOMBINATOR_
prefix, e.g. RECOMBINATOR_LOG_LEVEL=DEBUG.
"""
from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # --- App ---
    APP_NAME: str = "naive-recombinants"
    APP_VERSION: str = "0.2.0"

    # --- Logging ---
    LOG_LEVEL: str = "WARNING"

    # --- Output ---
    FASTA_WRAP: int = 60
    LARGE_OUTPUT_WARNING: int = 1_000_000

    # - extra="allow": unrelated RECOMBINATOR_* env vars won't crash
    # - env_file=None: no .env auto-loading
    model_config = SettingsConfigDict(
        env_prefix="RECOMBINATOR_",
        extra="allow",
        env_file=None,
        env_file_encoding="utf-8",
    )

    @property
    def log_level_name(self) -> str:
        return self.LOG_LEVEL.strip().upper()


settings = Settings()
