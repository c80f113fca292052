"""InMemoryPersistenceLayer — a dict-backed PersistenceLayer.

Same contract as the SQL implementation (sequential ids from 1, unique
names/titles, one loan per book) without a datastore. A single lock
serializes every operation so concurrent callers never see a half-applied
write.
"""

from __future__ import annotations

import threading

from lendctl.domain.entities import Book, Borrower, Loan, is_blank
from lendctl.domain.errors import ConstraintViolationError, RecordNotFoundError


class InMemoryPersistenceLayer:
    """Process-local stand-in for :class:`SqlPersistenceLayer`."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._borrowers: dict[int, str] = {}
        self._books: dict[int, str] = {}
        self._loans: dict[int, tuple[int, int, str]] = {}  # id -> (book, borrower, date)
        self._next_ids = {"borrower": 1, "book": 1, "loan": 1}

    def _claim_id(self, kind: str) -> int:
        value = self._next_ids[kind]
        self._next_ids[kind] = value + 1
        return value

    # ------------------------------------------------------------------
    # Borrowers
    # ------------------------------------------------------------------

    def save_new_borrower(self, name: str) -> int:
        if is_blank(name):
            raise ValueError("Borrower name must not be empty")
        with self._lock:
            if name in self._borrowers.values():
                raise ConstraintViolationError(f"save_new_borrower: {name!r} already exists")
            new_id = self._claim_id("borrower")
            self._borrowers[new_id] = name
            return new_id

    def update_borrower(self, borrower_id: int, new_name: str) -> None:
        if is_blank(new_name):
            raise ValueError("Borrower name must not be empty")
        with self._lock:
            if borrower_id not in self._borrowers:
                raise RecordNotFoundError("borrower", borrower_id)
            for other_id, other_name in self._borrowers.items():
                if other_name == new_name and other_id != borrower_id:
                    raise ConstraintViolationError(f"update_borrower: {new_name!r} already exists")
            self._borrowers[borrower_id] = new_name

    def get_borrower_name(self, borrower_id: int) -> str:
        with self._lock:
            try:
                return self._borrowers[borrower_id]
            except KeyError:
                raise RecordNotFoundError("borrower", borrower_id) from None

    def search_borrower_data_by_name(self, name: str) -> Borrower | None:
        with self._lock:
            for borrower_id, stored in self._borrowers.items():
                if stored == name:
                    return Borrower(id=borrower_id, name=stored)
        return None

    def count_borrowers(self) -> int:
        with self._lock:
            return len(self._borrowers)

    # ------------------------------------------------------------------
    # Books
    # ------------------------------------------------------------------

    def save_new_book(self, title: str) -> int:
        if is_blank(title):
            raise ValueError("Book title must not be empty")
        with self._lock:
            if title in self._books.values():
                raise ConstraintViolationError(f"save_new_book: {title!r} already exists")
            new_id = self._claim_id("book")
            self._books[new_id] = title
            return new_id

    def search_books_by_title(self, title: str) -> Book | None:
        with self._lock:
            for book_id, stored in self._books.items():
                if stored == title:
                    return Book(id=book_id, title=stored)
        return None

    def count_books(self) -> int:
        with self._lock:
            return len(self._books)

    # ------------------------------------------------------------------
    # Loans
    # ------------------------------------------------------------------

    def save_new_loan(self, book: Book, borrower: Borrower, checkout_date: str) -> int:
        with self._lock:
            if book.id not in self._books:
                raise ConstraintViolationError(f"save_new_loan: unknown book {book.id}")
            if borrower.id not in self._borrowers:
                raise ConstraintViolationError(f"save_new_loan: unknown borrower {borrower.id}")
            if any(held == book.id for held, _, _ in self._loans.values()):
                raise ConstraintViolationError(f"save_new_loan: book {book.id} already lent")
            new_id = self._claim_id("loan")
            self._loans[new_id] = (book.id, borrower.id, checkout_date)
            return new_id

    def search_loan_by_book(self, book: Book) -> Loan | None:
        with self._lock:
            for loan_id, (book_id, borrower_id, checkout_date) in self._loans.items():
                if book_id == book.id:
                    return Loan(
                        id=loan_id,
                        book=Book(id=book_id, title=self._books[book_id]),
                        borrower=Borrower(id=borrower_id, name=self._borrowers[borrower_id]),
                        checkout_date=checkout_date,
                    )
        return None
