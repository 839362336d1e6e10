"""Mini README: Ordered in-memory store of ledger transactions.

Structure:
    * SortKey - enum of the fields a ledger can be ordered by.
    * LedgerStore - owns the transaction sequence, appends and re-sorts it.

The store only ever grows or gets reordered. It performs no duplicate
detection, so loading the same file twice records every line twice. Callers
own the store instance and hand it to the analytics and codec helpers.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from ..errors import SortKeyError
from ..logging_utils import get_logger
from .transaction import Transaction

LOGGER = get_logger(__name__)


class SortKey(str, Enum):
    """Fields supported by ``LedgerStore.sort_by``."""

    DATE = "date"
    AMOUNT = "amount"
    CATEGORY = "category"


_SORT_FIELDS: Dict[SortKey, Callable[[Transaction], Union[date, Decimal, str]]] = {
    SortKey.DATE: lambda transaction: transaction.occurred_on,
    SortKey.AMOUNT: lambda transaction: transaction.amount,
    SortKey.CATEGORY: lambda transaction: transaction.category,
}


class LedgerStore:
    """Manage the ordered sequence of recorded transactions."""

    def __init__(self, transactions: Optional[Iterable[Transaction]] = None) -> None:
        self._transactions: List[Transaction] = list(transactions or [])
        LOGGER.debug("Ledger store initialised with %s transactions", len(self._transactions))

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.all())

    def append(self, transaction: Transaction) -> None:
        """Record a transaction at the end of the sequence."""

        self._transactions.append(transaction)
        LOGGER.debug(
            "Appended %s '%s' (%s)",
            transaction.transaction_type.value,
            transaction.description,
            transaction.amount,
        )

    def extend(self, transactions: Iterable[Transaction]) -> int:
        """Append several transactions in order and return how many were added."""

        batch = list(transactions)
        self._transactions.extend(batch)
        LOGGER.debug("Appended batch of %s transactions", len(batch))
        return len(batch)

    def sort_by(self, key: Union[str, SortKey]) -> Optional[SortKeyError]:
        """Stable ascending sort on ``key``.

        Unsupported keys leave the order untouched; the ``SortKeyError`` is
        returned to the caller rather than raised. ``None`` means success.
        """

        try:
            sort_key = SortKey(key.strip().lower() if isinstance(key, str) else key)
        except ValueError:
            error = SortKeyError(str(key), (member.value for member in SortKey))
            LOGGER.warning("%s", error)
            return error

        self._transactions.sort(key=_SORT_FIELDS[sort_key])
        LOGGER.debug("Sorted %s transactions by %s", len(self._transactions), sort_key.value)
        return None

    def all(self) -> Tuple[Transaction, ...]:
        """Return a read-only snapshot of the current order."""

        return tuple(self._transactions)
