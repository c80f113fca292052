"""Custom Click base classes with --examples support.

Provides LendCommand and LendGroup that accept an ``examples`` parameter.
When ``--examples`` is passed, the command prints usage examples and exits.
LendGroup also turns a datastore failure into a clean error and exit code 2
instead of a traceback.
"""

from __future__ import annotations

from typing import Any

import click

from lendctl.domain.errors import StorageError

STORAGE_FAILURE_EXIT_CODE = 2


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class LendCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class LendGroup(click.Group):
    """Click Group subclass that supports an ``--examples`` flag.

    Sets ``command_class = LendCommand`` so all subcommands automatically
    accept the ``examples`` parameter without explicit ``cls=`` each time.
    """

    command_class = LendCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except StorageError as exc:
            click.echo(f"ERROR: storage failure - {exc}", err=True)
            ctx.exit(STORAGE_FAILURE_EXIT_CODE)
