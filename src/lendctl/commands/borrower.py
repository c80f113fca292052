"""Command group: register, rename, and look up borrowers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lendctl.commands._base import LendGroup
from lendctl.domain.results import LibraryActionResult

if TYPE_CHECKING:
    from lendctl.commands._context import AppContext


@click.group(
    cls=LendGroup,
    examples="""\
  lendctl borrower register alice
  lendctl borrower find alice
  lendctl borrower update 1 bob
  lendctl --json borrower show 1""",
)
def borrower() -> None:
    """Manage borrowers."""


@borrower.command()
@click.argument("name")
@click.pass_obj
def register(app: AppContext, name: str) -> None:
    """Register a new borrower called NAME."""
    result = app.library.register_borrower(name)
    app.emit("register_borrower", result, data={"name": name})


@borrower.command()
@click.argument("borrower_id", type=int)
@click.argument("new_name")
@click.pass_obj
def update(app: AppContext, borrower_id: int, new_name: str) -> None:
    """Change the name of borrower BORROWER_ID to NEW_NAME."""
    result = app.library.update_borrower(borrower_id, new_name)
    app.emit("update_borrower", result, data={"id": borrower_id, "name": new_name})


@borrower.command()
@click.argument("borrower_id", type=int)
@click.pass_obj
def show(app: AppContext, borrower_id: int) -> None:
    """Show the current name of borrower BORROWER_ID."""
    found = app.library.get_borrower_name(borrower_id)
    if isinstance(found, LibraryActionResult):
        app.emit("get_borrower_name", found, data={"id": borrower_id})
        return
    app.emit(
        "get_borrower_name",
        LibraryActionResult.SUCCESS,
        data={"id": borrower_id, "name": found},
    )


@borrower.command()
@click.argument("name")
@click.pass_obj
def find(app: AppContext, name: str) -> None:
    """Find the borrower whose name is exactly NAME."""
    found = app.library.search_borrower_by_name(name)
    if isinstance(found, LibraryActionResult):
        app.emit("search_borrower", found, data={"name": name})
        return
    app.emit("search_borrower", LibraryActionResult.SUCCESS, data=found.model_dump())
