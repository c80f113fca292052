"""Database engine setup.

SQLite is the default datastore (a ``lendctl.db`` file next to the
config); any SQLAlchemy-supported server works by setting
``[database] url`` or the driver/host/port fields.

SQLAlchemy Core (not ORM) is used: every persistence operation is a
single short transaction, so there is nothing for a session or identity
map to do.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.pool import StaticPool

from lendctl.infrastructure.database.schema import metadata

if TYPE_CHECKING:
    from lendctl.config.models import DatabaseConfig

logger = logging.getLogger(__name__)

_MEMORY = ":memory:"


def database_url(config: DatabaseConfig, *, data_root: Path | None = None) -> URL:
    """Build the connection URL described by *config*.

    Relative SQLite file names resolve against *data_root* (default: cwd).
    """
    if config.url:
        return make_url(config.url)

    if config.driver.startswith("sqlite"):
        name = config.name
        if name != _MEMORY and not Path(name).is_absolute():
            name = str((data_root or Path.cwd()) / name)
        return URL.create(config.driver, database=name)

    password = config.password.get_secret_value() if config.password else None
    return URL.create(
        config.driver,
        username=config.username,
        password=password,
        host=config.host,
        port=config.port,
        database=config.name,
    )


def _is_memory_sqlite(url: URL) -> bool:
    return url.get_backend_name() == "sqlite" and url.database in (None, "", _MEMORY)


def create_db_engine(
    url: URL | str,
    *,
    connect_timeout: int = 10,
    pool_timeout: int = 30,
    pool_size: int = 5,
    echo: bool = False,
) -> Engine:
    """Create an engine for *url* with driver timeouts applied.

    SQLite engines get foreign keys and WAL mode switched on per
    connection. In-memory SQLite shares one connection across threads so
    every operation sees the same database.
    """
    url = make_url(url)
    kwargs: dict[str, Any] = {"echo": echo}

    if url.get_backend_name() == "sqlite":
        connect_args: dict[str, Any] = {"timeout": connect_timeout}
        if _is_memory_sqlite(url):
            connect_args["check_same_thread"] = False
            kwargs["poolclass"] = StaticPool
        else:
            kwargs["pool_size"] = pool_size
            kwargs["pool_timeout"] = pool_timeout
        engine = create_engine(url, connect_args=connect_args, **kwargs)

        @event.listens_for(engine, "connect")
        def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return create_engine(
        url,
        pool_size=pool_size,
        pool_timeout=pool_timeout,
        pool_pre_ping=True,
        connect_args={"connect_timeout": connect_timeout},
        **kwargs,
    )


def init_database(config: DatabaseConfig, *, data_root: Path | None = None) -> Engine:
    """Create the engine described by *config* and ensure all tables exist.

    Idempotent — safe to call on an existing database.

    Returns the engine ready for use.
    """
    url = database_url(config, data_root=data_root)
    if url.get_backend_name() == "sqlite" and not _is_memory_sqlite(url):
        Path(str(url.database)).parent.mkdir(parents=True, exist_ok=True)

    engine = create_db_engine(
        url,
        connect_timeout=config.connect_timeout,
        pool_timeout=config.pool_timeout,
        pool_size=config.pool_size,
        echo=config.echo,
    )
    metadata.create_all(engine)
    logger.debug("Database ready at %s", url.render_as_string(hide_password=True))
    return engine
