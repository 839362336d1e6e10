"""Mini README: Centralised configuration model and helpers for pocketledger.

Structure:
    * PocketLedgerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``POCKETLEDGER_*`` environment variables
    (or a local ``.env`` file) such as the ledger file location and the
    default sort order. Settings are validated once per process.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .ledger.store import SortKey


class PocketLedgerSettings(BaseSettings):
    """Runtime configuration for the pocketledger tools."""

    model_config = SettingsConfigDict(
        env_prefix="POCKETLEDGER_",
        env_file=".env",
        case_sensitive=False,
    )

    ledger_file: Path = Field(
        Path("transactions.txt"),
        description="Text file the ledger is loaded from and saved to.",
    )
    default_sort_key: str = Field(
        SortKey.DATE.value,
        description="Field used by the CLI when listing without an explicit sort.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level name, e.g. DEBUG or WARNING.",
    )

    @field_validator("ledger_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Union[str, Path]) -> Path:
        """Expand user directories in the configured ledger path."""

        return Path(value).expanduser()

    @field_validator("default_sort_key")
    @classmethod
    def _check_sort_key(cls, value: str) -> str:
        normalised = value.strip().lower()
        if normalised not in {member.value for member in SortKey}:
            raise ValueError(f"default_sort_key must be one of {[member.value for member in SortKey]}")
        return normalised

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unknown log level '{value}'")
        return normalised


@lru_cache()
def get_settings() -> PocketLedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return PocketLedgerSettings()
