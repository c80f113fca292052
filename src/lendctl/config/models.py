"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, lendctl.toml only contains
overrides. A fresh install needs no config file at all and stores its
data in ``lendctl.db`` under the working directory.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, SecretStr

# --- lendctl.toml sections ---


class DatabaseConfig(BaseModel):
    """[database] section.

    Either set ``url`` to a full SQLAlchemy URL, or describe the server
    with ``driver``/``host``/``port``/``username``/``password``/``name``.
    A non-empty ``url`` wins over the individual fields.
    """

    model_config = {"frozen": True}

    url: str | None = None
    driver: str = "sqlite"
    host: str | None = None
    port: int | None = None
    username: str | None = None
    password: SecretStr | None = None
    name: str = "lendctl.db"

    # Seconds the driver waits on connect/lock before failing.
    connect_timeout: int = Field(default=10, gt=0)
    # Seconds to wait for a pooled connection.
    pool_timeout: int = Field(default=30, gt=0)
    pool_size: int = Field(default=5, gt=0)
    echo: bool = False
