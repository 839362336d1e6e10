"""Mini README: Ledger core for recording and analysing personal finances.

This package groups the transaction entity, the ordered ``LedgerStore``, the
pure aggregation helpers, and the text file codec. The CLI and any other
front end build transactions, append them to a store they own, and pass that
store to the analytics and persistence helpers.
"""

from .analytics import (
    CategoryTotal,
    MonthlySummary,
    expenses_by_category,
    monthly_savings,
    most_spent_category,
    net_savings,
    summarise,
    total_expenses,
    total_income,
)
from .codec import LoadResult, format_line, load_ledger, parse_line, save_ledger, unsafe_fields
from .store import LedgerStore, SortKey
from .transaction import Transaction, TransactionResult, TransactionType, build_transaction

__all__ = [
    "CategoryTotal",
    "LedgerStore",
    "LoadResult",
    "MonthlySummary",
    "SortKey",
    "Transaction",
    "TransactionResult",
    "TransactionType",
    "build_transaction",
    "expenses_by_category",
    "format_line",
    "load_ledger",
    "monthly_savings",
    "most_spent_category",
    "net_savings",
    "parse_line",
    "save_ledger",
    "summarise",
    "total_expenses",
    "total_income",
    "unsafe_fields",
]
