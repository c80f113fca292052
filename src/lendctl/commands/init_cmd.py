"""Command: create the lendctl tables in the configured database."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lendctl.commands._base import LendCommand
from lendctl.domain.results import LibraryActionResult

if TYPE_CHECKING:
    from lendctl.commands._context import AppContext


@click.command(
    "init",
    cls=LendCommand,
    examples="""\
  lendctl init
  lendctl --database-url postgresql+psycopg://lend:secret@db:5432/lending init""",
)
@click.pass_obj
def init_cmd(app: AppContext) -> None:
    """Create the borrower, book, and loan tables if missing."""
    from lendctl.infrastructure.repositories.sql import SqlPersistenceLayer

    persistence = SqlPersistenceLayer(app.engine)
    app.emit(
        "init",
        LibraryActionResult.SUCCESS,
        data={
            "database": app.engine.url.render_as_string(hide_password=True),
            "borrowers": persistence.count_borrowers(),
            "books": persistence.count_books(),
        },
    )
