"""Exceptions raised across the persistence boundary.

Not-found and conflict are resolved into action results by the service
layer. Only :class:`StorageError` (and subclasses other than
:class:`ConstraintViolationError`) is expected to reach callers.
"""

from __future__ import annotations


class LendctlError(Exception):
    """Base class for lendctl errors."""


class RecordNotFoundError(LendctlError, LookupError):
    """A lookup by id matched no row."""

    def __init__(self, kind: str, key: object) -> None:
        super().__init__(f"No {kind} found with key: {key!r}")
        self.kind = kind
        self.key = key


class StorageError(LendctlError):
    """The datastore is unreachable or rejected the operation."""


class ConstraintViolationError(StorageError):
    """A write would violate a uniqueness or reference constraint."""
