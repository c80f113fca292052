"""PersistenceLayer implementations."""

from lendctl.infrastructure.repositories.memory import InMemoryPersistenceLayer
from lendctl.infrastructure.repositories.sql import SqlPersistenceLayer

__all__ = ["InMemoryPersistenceLayer", "SqlPersistenceLayer"]
