"""Mini README: Plain-text persistence for the ledger.

Structure:
    * format_line / parse_line - encode and decode a single transaction.
    * unsafe_fields - free text fields the format cannot carry.
    * save_ledger - overwrite a file with one line per transaction.
    * load_ledger - append every line of a file to a store, all or nothing.
    * LoadResult - outcome of a load, including the soft "not found" case.

File format, one transaction per line::

    <YYYY-MM-DD>,<description>,<amount>,<Income|Expense>,<category>

Fields are neither quoted nor escaped. A description or category containing a
comma or line break therefore cannot be read back; ``save_ledger`` warns when
it writes one. Amounts are plain fixed-point numbers without signs, exponents
or digit separators.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..errors import NotFoundError, ParseError, ValidationError
from ..logging_utils import get_logger
from .store import LedgerStore
from .transaction import Transaction, TransactionType

LOGGER = get_logger(__name__)

DELIMITER = ","
FIELD_COUNT = 5
RESERVED_CHARACTERS = (DELIMITER, "\n", "\r")
AMOUNT_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]+)?")


@dataclass(frozen=True, slots=True)
class LoadResult:
    """Summary of a ``load_ledger`` call."""

    source: Path
    found: bool
    loaded: int = 0
    error: Optional[NotFoundError] = None


def unsafe_fields(transaction: Transaction) -> List[str]:
    """Names of the free text fields holding a comma or line break."""

    return [
        field_name
        for field_name in ("description", "category")
        if any(character in getattr(transaction, field_name) for character in RESERVED_CHARACTERS)
    ]


def format_line(transaction: Transaction) -> str:
    """Encode a transaction without the trailing newline."""

    return DELIMITER.join(
        (
            transaction.occurred_on.isoformat(),
            transaction.description,
            format(transaction.amount, "f"),
            transaction.transaction_type.value,
            transaction.category,
        )
    )


def parse_line(line: str, line_number: int) -> Transaction:
    """Decode one line, raising ``ParseError`` with the line context on failure."""

    fields = line.split(DELIMITER)
    if len(fields) != FIELD_COUNT:
        raise ParseError(line_number, line, f"expected {FIELD_COUNT} fields, found {len(fields)}")
    raw_date, description, raw_amount, raw_type, category = fields

    try:
        occurred_on = date.fromisoformat(raw_date)
    except ValueError as error:
        raise ParseError(line_number, line, f"unparsable date {raw_date!r}") from error
    if not AMOUNT_PATTERN.fullmatch(raw_amount):
        raise ParseError(line_number, line, f"unparsable amount {raw_amount!r}")
    try:
        amount = Decimal(raw_amount)
    except InvalidOperation as error:
        raise ParseError(line_number, line, f"unparsable amount {raw_amount!r}") from error
    try:
        transaction_type = TransactionType(raw_type)
    except ValueError as error:
        raise ParseError(line_number, line, f"unknown transaction type {raw_type!r}") from error

    try:
        return Transaction(
            description=description,
            amount=amount,
            transaction_type=transaction_type,
            category=category,
            occurred_on=occurred_on,
        )
    except ValidationError as error:
        raise ParseError(line_number, line, str(error)) from error


def save_ledger(transactions: Iterable[Transaction], destination: Union[str, Path]) -> int:
    """Overwrite ``destination`` with the given transactions and return the line count."""

    path = Path(destination)
    written = 0
    with path.open("w", encoding="utf-8", newline="\n") as handle:
        for transaction in transactions:
            unsafe = unsafe_fields(transaction)
            if unsafe:
                LOGGER.warning(
                    "Transaction '%s' has a comma or line break in %s and will not load back cleanly",
                    transaction.description,
                    ", ".join(unsafe),
                )
            handle.write(format_line(transaction) + "\n")
            written += 1
    LOGGER.info("Saved %s transactions to %s", written, path)
    return written


def load_ledger(store: LedgerStore, source: Union[str, Path]) -> LoadResult:
    """Append the transactions stored in ``source`` to ``store``.

    A missing file is reported through the result and leaves the store as is.
    Any malformed line, including one that is not valid UTF-8, raises
    ``ParseError`` before anything is appended.
    """

    path = Path(source)
    if not path.exists():
        error = NotFoundError(path)
        LOGGER.info("%s; ledger left unchanged", error)
        return LoadResult(source=path, found=False, error=error)

    parsed: List[Transaction] = []
    with path.open("rb") as handle:
        for line_number, raw_line in enumerate(handle, start=1):
            raw_line = raw_line.rstrip(b"\r\n")
            try:
                line = raw_line.decode("utf-8")
            except UnicodeDecodeError as error:
                raise ParseError(line_number, repr(raw_line), "invalid UTF-8") from error
            if not line.strip():
                continue
            parsed.append(parse_line(line, line_number))

    loaded = store.extend(parsed)
    LOGGER.info("Loaded %s transactions from %s", loaded, path)
    return LoadResult(source=path, found=True, loaded=loaded)
