"""BaseService — abstract foundation for lendctl services.

Every service receives a :class:`PersistenceLayer` at construction time.
There is no shared module-level instance: each caller (a CLI invocation,
a request handler, a test) wires its own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lendctl.domain.ports import PersistenceLayer


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class LibraryService(BaseService):
            def register_borrower(self, name: str) -> LibraryActionResult:
                existing = self._persistence.search_borrower_data_by_name(name)
                ...
    """

    def __init__(self, persistence: PersistenceLayer) -> None:
        self._persistence = persistence
