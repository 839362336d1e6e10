"""Mini README: Shared fixtures for the pocketledger test-suite.

Structure:
    * scenario_transactions - salary, rent and groceries spread over two months.
    * scenario_store - a ``LedgerStore`` pre-populated with the scenario.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import List

import pytest

from pocketledger.ledger import LedgerStore, Transaction, TransactionType


@pytest.fixture
def scenario_transactions() -> List[Transaction]:
    return [
        Transaction(
            description="Salary",
            amount=Decimal("2000"),
            transaction_type=TransactionType.INCOME,
            category="Pay",
            occurred_on=date(2024, 1, 5),
        ),
        Transaction(
            description="Rent",
            amount=Decimal("800"),
            transaction_type=TransactionType.EXPENSE,
            category="Housing",
            occurred_on=date(2024, 1, 10),
        ),
        Transaction(
            description="Groceries",
            amount=Decimal("150"),
            transaction_type=TransactionType.EXPENSE,
            category="Food",
            occurred_on=date(2024, 2, 1),
        ),
    ]


@pytest.fixture
def scenario_store(scenario_transactions: List[Transaction]) -> LedgerStore:
    store = LedgerStore()
    for transaction in scenario_transactions:
        store.append(transaction)
    return store
