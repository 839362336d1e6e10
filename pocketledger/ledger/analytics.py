"""Mini README: Aggregations computed over ledger transactions.

Structure:
    * CategoryTotal - summed expenses for one category.
    * MonthlySummary - income, expenses and savings for one calendar month.
    * total_income / total_expenses / net_savings - headline totals.
    * expenses_by_category / most_spent_category - category breakdowns.
    * monthly_savings - chronological per-month savings.
    * summarise - JSON friendly snapshot combining the helpers above.

Every helper is a pure read over an iterable of transactions, so callers may
pass a ``LedgerStore`` directly or any snapshot taken from it. Output order is
deterministic: categories sort by name, months sort chronologically.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional

from .transaction import Transaction, TransactionType

ZERO = Decimal("0")


@dataclass(frozen=True, slots=True)
class CategoryTotal:
    """Summed expense amount for a single category."""

    category: str
    amount: Decimal


@dataclass(frozen=True, slots=True)
class MonthlySummary:
    """Income and expenses recorded during one calendar month."""

    month: date
    income: Decimal
    expenses: Decimal

    @property
    def savings(self) -> Decimal:
        return self.income - self.expenses

    @property
    def label(self) -> str:
        return self.month.strftime("%Y-%m")


def _total_for(transactions: Iterable[Transaction], transaction_type: TransactionType) -> Decimal:
    return sum(
        (transaction.amount for transaction in transactions if transaction.transaction_type is transaction_type),
        ZERO,
    )


def total_income(transactions: Iterable[Transaction]) -> Decimal:
    """Sum of all income amounts; zero for an empty ledger."""

    return _total_for(transactions, TransactionType.INCOME)


def total_expenses(transactions: Iterable[Transaction]) -> Decimal:
    """Sum of all expense amounts; zero for an empty ledger."""

    return _total_for(transactions, TransactionType.EXPENSE)


def net_savings(transactions: Iterable[Transaction]) -> Decimal:
    """Total income minus total expenses."""

    snapshot = list(transactions)
    return total_income(snapshot) - total_expenses(snapshot)


def expenses_by_category(transactions: Iterable[Transaction]) -> Dict[str, Decimal]:
    """Group expenses by exact category label, ordered by category name."""

    totals: Dict[str, Decimal] = {}
    for transaction in transactions:
        if transaction.is_expense:
            totals[transaction.category] = totals.get(transaction.category, ZERO) + transaction.amount
    return {category: totals[category] for category in sorted(totals)}


def most_spent_category(transactions: Iterable[Transaction]) -> Optional[CategoryTotal]:
    """Category with the largest expense total, or ``None`` without expenses.

    Ties resolve to the alphabetically smallest category name.
    """

    totals = expenses_by_category(transactions)
    if not totals:
        return None
    # totals is name-ordered, so max() keeps the first of equal amounts
    category = max(totals, key=lambda name: totals[name])
    return CategoryTotal(category=category, amount=totals[category])


def monthly_savings(transactions: Iterable[Transaction]) -> List[MonthlySummary]:
    """Per-month income, expenses and savings in chronological order.

    Months without any transaction are omitted rather than reported as zero.
    """

    income: Dict[date, Decimal] = {}
    expenses: Dict[date, Decimal] = {}
    for transaction in transactions:
        bucket = income if transaction.is_income else expenses
        month = transaction.month
        income.setdefault(month, ZERO)
        expenses.setdefault(month, ZERO)
        bucket[month] += transaction.amount
    return [
        MonthlySummary(month=month, income=income[month], expenses=expenses[month])
        for month in sorted(income)
    ]


def summarise(transactions: Iterable[Transaction]) -> Dict[str, Any]:
    """Aggregate ledger insights into serialisable values for display."""

    snapshot = list(transactions)
    top_category = most_spent_category(snapshot)
    income = total_income(snapshot)
    expenses = total_expenses(snapshot)
    return {
        "transaction_count": len(snapshot),
        "total_income": format(income, "f"),
        "total_expenses": format(expenses, "f"),
        "net_savings": format(income - expenses, "f"),
        "most_spent_category": top_category.category if top_category else None,
        "most_spent_amount": format(top_category.amount, "f") if top_category else None,
        "expenses_by_category": {
            category: format(amount, "f") for category, amount in expenses_by_category(snapshot).items()
        },
        "monthly": [
            {
                "month": summary.label,
                "income": format(summary.income, "f"),
                "expenses": format(summary.expenses, "f"),
                "savings": format(summary.savings, "f"),
            }
            for summary in monthly_savings(snapshot)
        ],
    }
