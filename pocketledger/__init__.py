"""Mini README: Core package initializer for pocketledger.

Exposes the logging helper and the error hierarchy so callers can reach the
common pieces without knowing the module layout. The ledger API itself lives
in ``pocketledger.ledger``.
"""

from .errors import LedgerError, NotFoundError, ParseError, SortKeyError, ValidationError
from .logging_utils import get_logger

__all__ = [
    "LedgerError",
    "NotFoundError",
    "ParseError",
    "SortKeyError",
    "ValidationError",
    "get_logger",
]
