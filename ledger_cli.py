"""Mini README: Command line entry point for the pocketledger tools.

This script exposes a Typer CLI that loads the ledger file, records new
transactions, and prints summaries. Every command is non-interactive: values
come from arguments and options, and invalid input is reported with a
non-zero exit code instead of a prompt. Paths default to the configured
``POCKETLEDGER_LEDGER_FILE`` setting.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import NoReturn, Optional

import typer

from pocketledger.configuration import get_settings
from pocketledger.errors import LedgerError, ValidationError
from pocketledger.ledger import (
    LedgerStore,
    build_transaction,
    expenses_by_category,
    load_ledger,
    monthly_savings,
    save_ledger,
    summarise,
    unsafe_fields,
)
from pocketledger.logging_utils import configure_root_logger

cli = typer.Typer(help="Record income and expenses and summarise a personal ledger.")


def _open_ledger(file: Optional[Path]) -> tuple[LedgerStore, Path]:
    """Load the ledger file into a fresh store, reporting a missing file."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    path = file or settings.ledger_file
    store = LedgerStore()
    try:
        result = load_ledger(store, path)
    except LedgerError as error:
        _fail(error)
    if not result.found:
        typer.echo("No data found. Starting with an empty ledger.")
    return store, path


def _fail(error: Exception) -> NoReturn:
    typer.secho(f"Error: {error}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


@cli.command()
def add(
    description: str = typer.Argument(..., help="What the money was for."),
    amount: str = typer.Argument(..., help="Non-negative amount, e.g. 12.50."),
    transaction_type: str = typer.Option(..., "--type", "-t", help="Income or Expense."),
    category: str = typer.Option(..., "--category", "-c", help="Free text category label."),
    occurred_on: Optional[str] = typer.Option(
        None, "--date", "-d", help="Date as YYYY-MM-DD (defaults to today)."
    ),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Ledger file to read and write."),
) -> None:
    """Record a transaction and save the ledger."""

    result = build_transaction(
        description=description,
        amount=amount,
        transaction_type=transaction_type,
        category=category,
        occurred_on=occurred_on or date.today(),
    )
    if not result.ok:
        _fail(result.error)
    transaction = result.unwrap()
    unsafe = unsafe_fields(transaction)
    if unsafe:
        _fail(ValidationError(unsafe[0], "must not contain commas or line breaks"))
    store, path = _open_ledger(file)
    store.append(transaction)
    save_ledger(store, path)
    typer.echo(f"Recorded. Ledger now holds {len(store)} transactions.")


@cli.command("list")
def list_transactions(
    sort: Optional[str] = typer.Option(None, "--sort", "-s", help="date, amount or category."),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Ledger file to read and write."),
) -> None:
    """Print every transaction, optionally sorted."""

    store, _ = _open_ledger(file)
    if sort:
        error = store.sort_by(sort)
        if error is not None:
            _fail(error)
    for transaction in store:
        typer.echo(
            f"{transaction.occurred_on.isoformat()}  {transaction.transaction_type.value:<7}  "
            f"{format(transaction.amount, 'f'):>10}  {transaction.category:<12}  {transaction.description}"
        )


@cli.command()
def sort(
    key: Optional[str] = typer.Argument(None, help="date, amount or category."),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Ledger file to read and write."),
) -> None:
    """Reorder the ledger file by a field and save it."""

    store, path = _open_ledger(file)
    error = store.sort_by(key or get_settings().default_sort_key)
    if error is not None:
        _fail(error)
    save_ledger(store, path)
    typer.echo(f"Sorted {len(store)} transactions.")


@cli.command()
def summary(
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Ledger file to read and write."),
) -> None:
    """Print totals, net savings and the biggest expense category."""

    store, _ = _open_ledger(file)
    snapshot = summarise(store)
    typer.echo(f"Total income:   {snapshot['total_income']}")
    typer.echo(f"Total expenses: {snapshot['total_expenses']}")
    typer.echo(f"Net savings:    {snapshot['net_savings']}")
    if snapshot["most_spent_category"] is None:
        typer.echo("Most spent category: none")
    else:
        typer.echo(
            f"Most spent category: {snapshot['most_spent_category']} ({snapshot['most_spent_amount']})"
        )


@cli.command()
def categories(
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Ledger file to read and write."),
) -> None:
    """Print expense totals per category."""

    store, _ = _open_ledger(file)
    totals = expenses_by_category(store)
    if not totals:
        typer.echo("No expenses recorded.")
    for category, amount in totals.items():
        typer.echo(f"{category}: {format(amount, 'f')}")


@cli.command()
def monthly(
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Ledger file to read and write."),
) -> None:
    """Print income, expenses and savings per month."""

    store, _ = _open_ledger(file)
    for month in monthly_savings(store):
        typer.echo(
            f"{month.label}  income {format(month.income, 'f')}  "
            f"expenses {format(month.expenses, 'f')}  savings {format(month.savings, 'f')}"
        )


if __name__ == "__main__":
    cli()
