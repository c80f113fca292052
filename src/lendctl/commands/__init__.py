"""Subcommand modules for lendctl.

Provides register_commands() which uses deferred imports to keep
``lendctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from lendctl.commands.book import book
    from lendctl.commands.borrower import borrower
    from lendctl.commands.lend import loan

    cli.add_command(borrower)
    cli.add_command(book)
    cli.add_command(loan)

    # --- Standalone commands ---
    from lendctl.commands.init_cmd import init_cmd
    from lendctl.commands.lend import lend

    cli.add_command(init_cmd)
    cli.add_command(lend)
