"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy LibraryService wiring and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from lendctl.output.formatters import format_outcome

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from lendctl.config.settings import LendSettings
    from lendctl.domain.results import LibraryActionResult
    from lendctl.services.library import LibraryService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The engine and service are built on first use so ``--help`` and
    ``--version`` never touch the database.
    """

    def __init__(self, settings: LendSettings) -> None:
        self.settings = settings
        self._engine: Engine | None = None
        self._library: LibraryService | None = None

        from lendctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def engine(self) -> Engine:
        """The database engine (created, with tables, on first access)."""
        if self._engine is None:
            from sqlalchemy.exc import SQLAlchemyError

            from lendctl.domain.errors import StorageError
            from lendctl.infrastructure.database.engine import init_database

            try:
                self._engine = init_database(
                    self.settings.database, data_root=self.settings.data_root
                )
            except SQLAlchemyError as exc:
                raise StorageError(f"cannot open database: {exc}") from exc
        return self._engine

    @property
    def library(self) -> LibraryService:
        """The LibraryService wired to the configured datastore."""
        if self._library is None:
            from lendctl.infrastructure.repositories.sql import SqlPersistenceLayer
            from lendctl.services.library import LibraryService

            self._library = LibraryService(SqlPersistenceLayer(self.engine))
        return self._library

    def close(self) -> None:
        """Release pooled connections."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._library = None

    def emit(
        self,
        op: str,
        result: LibraryActionResult,
        *,
        data: dict[str, Any] | None = None,
    ) -> None:
        """Format and output one outcome with correct exit semantics.

        * SUCCESS: writes to stdout, returns normally.
        * Any other tag: writes to stderr, exits with code 1.
        """
        output = format_outcome(op, result, data=data, json_output=self.settings.json_output)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
