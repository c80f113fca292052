"""Command group: catalogue and look up books."""

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
  lendctl book register "Hitchhiker's Guide to the Galaxy"
  lendctl book find "Hitchhiker's Guide to the Galaxy" """,
)
def book() -> None:
    """Manage the book catalogue."""


@book.command()
@click.argument("title")
@click.pass_obj
def register(app: AppContext, title: str) -> None:
    """Catalogue a new book titled TITLE."""
    result = app.library.register_book(title)
    app.emit("register_book", result, data={"title": title})


@book.command()
@click.argument("title")
@click.pass_obj
def find(app: AppContext, title: str) -> None:
    """Find the book whose title is exactly TITLE."""
    found = app.library.search_book_by_title(title)
    if isinstance(found, LibraryActionResult):
        app.emit("search_book", found, data={"title": title})
        return
    app.emit("search_book", LibraryActionResult.SUCCESS, data=found.model_dump())
