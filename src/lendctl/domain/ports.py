"""PersistenceLayer — the capability set the service layer depends on.

Implemented by :class:`~lendctl.infrastructure.repositories.sql.SqlPersistenceLayer`
(SQLAlchemy Core) and
:class:`~lendctl.infrastructure.repositories.memory.InMemoryPersistenceLayer`
(dict-backed fake for tests and dry runs). Both honour the same contract:

- Ids are positive integers assigned on creation, starting at 1.
- Borrower names, book titles, and the book of a loan are unique.
- Lookups by name or title are exact matches and return ``None`` when
  nothing matches; lookups by id raise :class:`RecordNotFoundError`.
- Every operation is atomic from the caller's point of view.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from lendctl.domain.entities import Book, Borrower, Loan


@runtime_checkable
class PersistenceLayer(Protocol):
    """Data access for borrowers, books, and loans. No business rules."""

    def save_new_borrower(self, name: str) -> int:
        """Insert a borrower and return its new id.

        Raises:
            ValueError: If *name* is empty.
            ConstraintViolationError: If a borrower with *name* already exists.
            StorageError: If the datastore rejects the write.
        """
        ...

    def update_borrower(self, borrower_id: int, new_name: str) -> None:
        """Rename the borrower with *borrower_id*.

        Raises:
            ValueError: If *new_name* is empty.
            RecordNotFoundError: If no borrower has *borrower_id*.
            ConstraintViolationError: If another borrower already has *new_name*.
        """
        ...

    def get_borrower_name(self, borrower_id: int) -> str:
        """Return the current name of *borrower_id*.

        Raises:
            RecordNotFoundError: If no borrower has *borrower_id*.
        """
        ...

    def search_borrower_data_by_name(self, name: str) -> Borrower | None:
        """Return the borrower whose name equals *name*, or None."""
        ...

    def save_new_book(self, title: str) -> int:
        """Insert a book and return its new id.

        Raises:
            ValueError: If *title* is empty.
            ConstraintViolationError: If a book with *title* already exists.
        """
        ...

    def search_books_by_title(self, title: str) -> Book | None:
        """Return the book whose title equals *title*, or None."""
        ...

    def save_new_loan(self, book: Book, borrower: Borrower, checkout_date: str) -> int:
        """Record that *borrower* holds *book* and return the loan id.

        Raises:
            ConstraintViolationError: If *book* is already lent out, or
                *book* or *borrower* is not stored.
        """
        ...

    def search_loan_by_book(self, book: Book) -> Loan | None:
        """Return the open loan for *book*, or None."""
        ...

    def count_borrowers(self) -> int:
        """Number of registered borrowers."""
        ...

    def count_books(self) -> int:
        """Number of catalogued books."""
        ...
