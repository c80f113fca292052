"""Tests for the book command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from lendctl.cli import cli

HITCHHIKER = "Hitchhiker's Guide to the Galaxy"


@pytest.mark.usefixtures("_isolated_db")
class TestBookCommands:
    def test_register_and_find(self, cli_runner: CliRunner) -> None:
        registered = cli_runner.invoke(cli, ["book", "register", HITCHHIKER])
        assert registered.exit_code == 0

        result = cli_runner.invoke(cli, ["--json", "book", "find", HITCHHIKER])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"] == {"id": 1, "title": HITCHHIKER}

    def test_register_twice(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["book", "register", "Dune"])
        result = cli_runner.invoke(cli, ["book", "register", "Dune"])
        assert result.exit_code == 1

    def test_find_missing(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "book", "find", "Dune"])
        assert result.exit_code == 1
        assert '"not_found"' in result.output
