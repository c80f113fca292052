"""SqlPersistenceLayer — the datastore-backed PersistenceLayer.

Each public method checks a connection out of the engine's pool and runs
exactly one transaction (``engine.begin()``): commit on success, rollback
on any exception. Driver errors are translated at this boundary so the
service layer never sees SQLAlchemy types.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

from sqlalchemy import func, insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from lendctl.domain.entities import Book, Borrower, Loan, is_blank
from lendctl.domain.errors import ConstraintViolationError, RecordNotFoundError, StorageError
from lendctl.infrastructure.database.schema import books, borrowers, loans

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy import Connection
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

# Primary keys are signed 64-bit integers on every supported backend.
_MIN_ID = -(2**63)
_MAX_ID = 2**63 - 1


def _storable_id(record_id: int) -> bool:
    """Whether *record_id* fits the primary key column at all."""
    return _MIN_ID <= record_id <= _MAX_ID


class SqlPersistenceLayer:
    """Encapsulates SQL for borrowers, books, and loans."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    @property
    def engine(self) -> Engine:
        """The underlying SQLAlchemy engine."""
        return self._engine

    @contextmanager
    def _transaction(self, op: str) -> Iterator[Connection]:
        """One atomic unit of work with driver errors translated."""
        try:
            with self._engine.begin() as conn:
                yield conn
        except IntegrityError as exc:
            logger.debug("%s rejected by constraint: %s", op, exc.orig)
            raise ConstraintViolationError(f"{op}: constraint violated") from exc
        except SQLAlchemyError as exc:
            raise StorageError(f"{op}: {exc}") from exc

    # ------------------------------------------------------------------
    # Borrowers
    # ------------------------------------------------------------------

    def save_new_borrower(self, name: str) -> int:
        """Insert a borrower and return its new id."""
        if is_blank(name):
            raise ValueError("Borrower name must not be empty")
        with self._transaction("save_new_borrower") as conn:
            result = conn.execute(insert(borrowers).values(name=name))
            new_id = int(result.inserted_primary_key[0])
        logger.debug("Saved borrower %d", new_id)
        return new_id

    def update_borrower(self, borrower_id: int, new_name: str) -> None:
        """Rename the borrower with *borrower_id*."""
        if is_blank(new_name):
            raise ValueError("Borrower name must not be empty")
        if not _storable_id(borrower_id):
            raise RecordNotFoundError("borrower", borrower_id)
        with self._transaction("update_borrower") as conn:
            result = conn.execute(
                update(borrowers).where(borrowers.c.id == borrower_id).values(name=new_name)
            )
            if result.rowcount == 0:
                raise RecordNotFoundError("borrower", borrower_id)

    def get_borrower_name(self, borrower_id: int) -> str:
        """Return the current name of *borrower_id*."""
        if not _storable_id(borrower_id):
            raise RecordNotFoundError("borrower", borrower_id)
        with self._transaction("get_borrower_name") as conn:
            name = conn.execute(
                select(borrowers.c.name).where(borrowers.c.id == borrower_id)
            ).scalar_one_or_none()
        if name is None:
            raise RecordNotFoundError("borrower", borrower_id)
        return str(name)

    def search_borrower_data_by_name(self, name: str) -> Borrower | None:
        """Return the borrower whose name equals *name*, or None."""
        with self._transaction("search_borrower_data_by_name") as conn:
            row = conn.execute(
                select(borrowers.c.id, borrowers.c.name).where(borrowers.c.name == name)
            ).first()
        if row is None:
            return None
        return Borrower(id=row.id, name=row.name)

    def count_borrowers(self) -> int:
        """Number of registered borrowers."""
        with self._transaction("count_borrowers") as conn:
            return int(conn.execute(select(func.count(borrowers.c.id))).scalar_one() or 0)

    # ------------------------------------------------------------------
    # Books
    # ------------------------------------------------------------------

    def save_new_book(self, title: str) -> int:
        """Insert a book and return its new id."""
        if is_blank(title):
            raise ValueError("Book title must not be empty")
        with self._transaction("save_new_book") as conn:
            result = conn.execute(insert(books).values(title=title))
            new_id = int(result.inserted_primary_key[0])
        logger.debug("Saved book %d", new_id)
        return new_id

    def search_books_by_title(self, title: str) -> Book | None:
        """Return the book whose title equals *title*, or None."""
        with self._transaction("search_books_by_title") as conn:
            row = conn.execute(
                select(books.c.id, books.c.title).where(books.c.title == title)
            ).first()
        if row is None:
            return None
        return Book(id=row.id, title=row.title)

    def count_books(self) -> int:
        """Number of catalogued books."""
        with self._transaction("count_books") as conn:
            return int(conn.execute(select(func.count(books.c.id))).scalar_one() or 0)

    # ------------------------------------------------------------------
    # Loans
    # ------------------------------------------------------------------

    def save_new_loan(self, book: Book, borrower: Borrower, checkout_date: str) -> int:
        """Record that *borrower* holds *book* and return the loan id."""
        if not (_storable_id(book.id) and _storable_id(borrower.id)):
            raise ConstraintViolationError("save_new_loan: unknown book or borrower")
        with self._transaction("save_new_loan") as conn:
            result = conn.execute(
                insert(loans).values(
                    book=book.id,
                    borrower=borrower.id,
                    checkout_date=checkout_date,
                )
            )
            new_id = int(result.inserted_primary_key[0])
        logger.debug("Saved loan %d (book %d -> borrower %d)", new_id, book.id, borrower.id)
        return new_id

    def search_loan_by_book(self, book: Book) -> Loan | None:
        """Return the open loan for *book*, or None."""
        if not _storable_id(book.id):
            return None
        stmt = (
            select(
                loans.c.id,
                loans.c.checkout_date,
                books.c.id.label("book_id"),
                books.c.title,
                borrowers.c.id.label("borrower_id"),
                borrowers.c.name,
            )
            .join(books, loans.c.book == books.c.id)
            .join(borrowers, loans.c.borrower == borrowers.c.id)
            .where(loans.c.book == book.id)
        )
        with self._transaction("search_loan_by_book") as conn:
            row = conn.execute(stmt).first()
        if row is None:
            return None
        return Loan(
            id=row.id,
            book=Book(id=row.book_id, title=row.title),
            borrower=Borrower(id=row.borrower_id, name=row.name),
            checkout_date=row.checkout_date,
        )
