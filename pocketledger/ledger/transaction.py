"""Mini README: Transaction entity and its validation helpers.

Structure:
    * TransactionType - enum representing income versus expense entries.
    * Transaction - frozen dataclass storing a single financial event.
    * TransactionResult - explicit success/failure wrapper for construction.
    * build_transaction - validate raw inputs without raising.

Transactions carry no identifier and are never edited once recorded. Amounts
are positive magnitudes stored as ``Decimal``; the ``transaction_type`` field
is what distinguishes money coming in from money going out.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Dict, Optional

from ..errors import LedgerError, ValidationError


class TransactionType(str, Enum):
    """Enumerate the supported transaction kinds using their on-disk labels."""

    INCOME = "Income"
    EXPENSE = "Expense"

    @classmethod
    def from_str(cls, value: object) -> "TransactionType":
        """Coerce arbitrary casing into a valid transaction type."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalised = value.strip().lower()
            for member in cls:
                if member.value.lower() == normalised:
                    return member
        raise ValidationError(
            "transaction_type",
            f"{value!r} is not one of {', '.join(member.value for member in cls)}",
        )


def _coerce_amount(value: object) -> Decimal:
    """Convert numeric input into a non-negative finite ``Decimal``."""

    if isinstance(value, bool):
        raise ValidationError("amount", "booleans are not amounts")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as error:
        raise ValidationError("amount", f"{value!r} is not a decimal number") from error
    if not amount.is_finite():
        raise ValidationError("amount", f"{value!r} is not a finite number")
    if amount < 0:
        raise ValidationError("amount", "must be zero or positive")
    return amount.copy_abs()


def _coerce_date(value: object) -> date:
    """Parse ISO formatted strings or date objects safely."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as error:
            raise ValidationError("occurred_on", f"{value!r} is not a YYYY-MM-DD date") from error
    raise ValidationError("occurred_on", "dates must be ISO strings or date/datetime instances")


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represent one recorded income or expense."""

    description: str
    amount: Decimal
    transaction_type: TransactionType
    category: str
    occurred_on: date

    def __post_init__(self) -> None:
        if not isinstance(self.description, str):
            raise ValidationError("description", "must be text")
        if not isinstance(self.category, str):
            raise ValidationError("category", "must be text")
        object.__setattr__(self, "amount", _coerce_amount(self.amount))
        object.__setattr__(self, "transaction_type", TransactionType.from_str(self.transaction_type))
        object.__setattr__(self, "occurred_on", _coerce_date(self.occurred_on))

    @property
    def is_income(self) -> bool:
        return self.transaction_type is TransactionType.INCOME

    @property
    def is_expense(self) -> bool:
        return self.transaction_type is TransactionType.EXPENSE

    @property
    def month(self) -> date:
        """First day of the calendar month the transaction falls in."""

        return self.occurred_on.replace(day=1)

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with serialisable values."""

        return {
            "description": self.description,
            "amount": format(self.amount, "f"),
            "transaction_type": self.transaction_type.value,
            "category": self.category,
            "occurred_on": self.occurred_on.isoformat(),
        }


@dataclass(frozen=True, slots=True)
class TransactionResult:
    """Outcome of ``build_transaction``: either a transaction or the failure."""

    transaction: Optional[Transaction] = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Transaction:
        """Return the transaction or raise the recorded validation failure."""

        if self.error is not None:
            raise self.error
        if self.transaction is None:
            raise LedgerError("Transaction result holds neither a transaction nor an error")
        return self.transaction


def build_transaction(
    *,
    description: str,
    amount: object,
    transaction_type: object,
    category: str,
    occurred_on: object,
) -> TransactionResult:
    """Validate raw inputs and wrap the outcome instead of raising."""

    try:
        transaction = Transaction(
            description=description,
            amount=amount,  # type: ignore[arg-type]
            transaction_type=transaction_type,  # type: ignore[arg-type]
            category=category,
            occurred_on=occurred_on,  # type: ignore[arg-type]
        )
    except ValidationError as error:
        return TransactionResult(error=error)
    return TransactionResult(transaction=transaction)
