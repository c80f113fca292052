"""Commands: lend a book out, and see who holds it."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lendctl.commands._base import LendCommand, LendGroup
from lendctl.domain.results import LibraryActionResult

if TYPE_CHECKING:
    from lendctl.commands._context import AppContext


@click.command(
    cls=LendCommand,
    examples="""\
  lendctl lend "Dune" alice
  lendctl lend "Dune" alice --date 2024-05-01""",
)
@click.argument("title")
@click.argument("borrower_name")
@click.option("--date", "checkout_date", default=None, help="Checkout date (YYYY-MM-DD).")
@click.pass_obj
def lend(app: AppContext, title: str, borrower_name: str, checkout_date: str | None) -> None:
    """Lend the book TITLE to BORROWER_NAME."""
    result = app.library.lend_book(title, borrower_name, checkout_date=checkout_date)
    app.emit("lend_book", result, data={"title": title, "borrower": borrower_name})


@click.group(cls=LendGroup)
def loan() -> None:
    """Inspect loans."""


@loan.command()
@click.argument("title")
@click.pass_obj
def find(app: AppContext, title: str) -> None:
    """Show who holds the book TITLE."""
    found = app.library.find_loan(title)
    if isinstance(found, LibraryActionResult):
        app.emit("find_loan", found, data={"title": title})
        return
    app.emit("find_loan", LibraryActionResult.SUCCESS, data=found.model_dump())
