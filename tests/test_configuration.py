"""Mini README: Tests for environment driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from pocketledger.configuration import PocketLedgerSettings


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prefixed environment variables override the defaults."""

    monkeypatch.setenv("POCKETLEDGER_LEDGER_FILE", "~/books/ledger.txt")
    monkeypatch.setenv("POCKETLEDGER_DEFAULT_SORT_KEY", "Amount")
    monkeypatch.setenv("POCKETLEDGER_LOG_LEVEL", "debug")

    settings = PocketLedgerSettings()

    assert settings.ledger_file == Path("~/books/ledger.txt").expanduser()
    assert settings.default_sort_key == "amount"
    assert settings.log_level == "DEBUG"


def test_settings_reject_unknown_sort_key(monkeypatch: pytest.MonkeyPatch) -> None:
    """Only supported sort fields are accepted as the default."""

    monkeypatch.setenv("POCKETLEDGER_DEFAULT_SORT_KEY", "colour")

    with pytest.raises(ValidationError):
        PocketLedgerSettings()


def test_settings_only_expose_ledger_options() -> None:
    """Every configurable field is one the ledger tools actually read."""

    assert set(PocketLedgerSettings.model_fields) == {"ledger_file", "default_sort_key", "log_level"}
