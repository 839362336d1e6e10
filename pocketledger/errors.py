"""Mini README: Error hierarchy shared by the ledger modules.

Structure:
    * LedgerError - base class so callers can catch every ledger failure.
    * ValidationError - a transaction field failed type or format checks.
    * ParseError - a persisted line could not be decoded.
    * NotFoundError - the ledger file to load does not exist.
    * SortKeyError - an unsupported sort field was requested.

Each subclass also derives from the closest built-in exception so existing
``except ValueError`` style handlers keep working.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Tuple, Union


class LedgerError(Exception):
    """Base class for all pocketledger failures."""


class ValidationError(LedgerError, ValueError):
    """Raised when a transaction field is missing or malformed."""

    def __init__(self, field_name: str, message: str) -> None:
        super().__init__(f"Invalid {field_name}: {message}")
        self.field_name = field_name
        self.message = message


class ParseError(LedgerError, ValueError):
    """Raised when a ledger file line cannot be decoded."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        super().__init__(f"Line {line_number} is malformed ({reason}): {line!r}")
        self.line_number = line_number
        self.line = line
        self.reason = reason


class NotFoundError(LedgerError, FileNotFoundError):
    """Reported when the ledger file to load is absent."""

    def __init__(self, path: Union[str, Path]) -> None:
        super().__init__(f"No data found at {path}")
        self.path = Path(path)

    def __str__(self) -> str:
        return f"No data found at {self.path}"


class SortKeyError(LedgerError, KeyError):
    """Reported when a sort is requested on an unsupported field."""

    def __init__(self, key: str, supported: Iterable[str]) -> None:
        self.key = key
        self.supported: Tuple[str, ...] = tuple(supported)
        super().__init__(key)

    def __str__(self) -> str:
        return f"Unsupported sort key '{self.key}'. Choose one of: {', '.join(self.supported)}"
