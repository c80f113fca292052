"""Root CLI group for lendctl with global flags and command registration."""

from __future__ import annotations

import click

from lendctl import __version__
from lendctl.commands import register_commands
from lendctl.commands._base import LendGroup
from lendctl.commands._context import AppContext
from lendctl.config.settings import LendSettings


@click.group(cls=LendGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="lendctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--database-url", default=None, help="SQLAlchemy URL of the datastore.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    database_url: str | None,
) -> None:
    """lendctl — library lending records."""
    ctx.ensure_object(dict)
    settings = LendSettings.from_cli(
        config_path=config_path,
        database_url=database_url,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    app = AppContext(settings)
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
