"""Mini README: Tests for the ordered ledger store.

These tests confirm append keeps insertion order without deduplication,
sorting is stable and idempotent, and unsupported sort keys are reported
without touching the sequence.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from pocketledger.errors import SortKeyError
from pocketledger.ledger import LedgerStore, SortKey, Transaction, TransactionType


def _expense(description: str, amount: str, category: str, day: int) -> Transaction:
    return Transaction(description, Decimal(amount), TransactionType.EXPENSE, category, date(2024, 6, day))


def test_append_keeps_insertion_order_and_duplicates() -> None:
    """The store never deduplicates, even for identical transactions."""

    store = LedgerStore()
    lunch = _expense("Lunch", "12", "Food", 3)
    store.append(lunch)
    store.append(lunch)

    assert len(store) == 2
    assert store.all() == (lunch, lunch)


def test_sort_by_amount_is_stable() -> None:
    """Entries with equal amounts keep their previous relative order."""

    first = _expense("Bus", "5", "Transport", 9)
    second = _expense("Snack", "5", "Food", 2)
    big = _expense("Shoes", "80", "Clothing", 1)
    store = LedgerStore([first, big, second])

    assert store.sort_by("amount") is None
    assert [transaction.description for transaction in store] == ["Bus", "Snack", "Shoes"]


def test_sort_by_is_idempotent() -> None:
    """Sorting twice on the same key gives the same sequence as sorting once."""

    store = LedgerStore(
        [
            _expense("Cinema", "15", "Leisure", 20),
            _expense("Rent", "700", "Housing", 1),
            _expense("Books", "30", "Leisure", 11),
        ]
    )

    store.sort_by(SortKey.CATEGORY)
    once = store.all()
    store.sort_by("category")

    assert store.all() == once
    assert [transaction.category for transaction in once] == ["Housing", "Leisure", "Leisure"]
    assert [transaction.description for transaction in once] == ["Rent", "Cinema", "Books"]


def test_sort_by_date_accepts_loose_key_spelling() -> None:
    """Key names are matched without regard to case or surrounding spaces."""

    store = LedgerStore([_expense("Late", "1", "A", 28), _expense("Early", "1", "A", 2)])

    assert store.sort_by(" Date ") is None
    assert [transaction.description for transaction in store] == ["Early", "Late"]


def test_unknown_sort_key_reports_error_and_keeps_order() -> None:
    """An unsupported key is returned as an error and leaves the order unchanged."""

    store = LedgerStore([_expense("B", "2", "X", 5), _expense("A", "1", "Y", 4)])
    before = store.all()

    error = store.sort_by("zzz")

    assert isinstance(error, SortKeyError)
    assert error.key == "zzz"
    assert "date" in error.supported
    assert store.all() == before
