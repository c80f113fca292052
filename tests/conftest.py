"""Shared pytest fixtures for lendctl tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from lendctl.config.models import DatabaseConfig
from lendctl.domain.ports import PersistenceLayer
from lendctl.infrastructure.database.engine import init_database
from lendctl.infrastructure.repositories import InMemoryPersistenceLayer, SqlPersistenceLayer
from lendctl.services.library import LibraryService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Generator[Engine]:
    """Initialized SQLite file engine with all tables created."""
    engine = init_database(DatabaseConfig(), data_root=tmp_path)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sql_persistence(db_engine: Engine) -> SqlPersistenceLayer:
    return SqlPersistenceLayer(db_engine)


@pytest.fixture
def memory_persistence() -> InMemoryPersistenceLayer:
    return InMemoryPersistenceLayer()


@pytest.fixture(params=["sql", "memory"])
def persistence(request: pytest.FixtureRequest) -> PersistenceLayer:
    """Each PersistenceLayer implementation in turn, starting empty."""
    return request.getfixturevalue(f"{request.param}_persistence")


@pytest.fixture
def library(persistence: PersistenceLayer) -> LibraryService:
    """LibraryService wired to a fresh persistence layer."""
    return LibraryService(persistence)


@pytest.fixture
def _isolated_db(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run CLI commands against a fresh ``lendctl.db`` in a temp directory.

    Use via ``@pytest.mark.usefixtures("_isolated_db")`` on command test classes.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LENDCTL_CONFIG", raising=False)
    monkeypatch.delenv("LENDCTL_DATABASE__URL", raising=False)
