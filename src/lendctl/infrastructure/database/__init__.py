"""Database engine and schema via SQLAlchemy Core."""

from lendctl.infrastructure.database.engine import create_db_engine, database_url, init_database
from lendctl.infrastructure.database.schema import books, borrowers, loans, metadata

__all__ = [
    "books",
    "borrowers",
    "create_db_engine",
    "database_url",
    "init_database",
    "loans",
    "metadata",
]
