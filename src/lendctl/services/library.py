"""LibraryService — borrower registration, catalogue lookups, and lending.

Registration pipeline: VALIDATE → CHECK_EXISTING → SAVE → RESPOND

Validation failures, misses, and conflicts come back as
:class:`LibraryActionResult` tags. A :class:`StorageError` from the
persistence layer propagates to the caller unchanged.
"""

from __future__ import annotations

import logging

from lendctl.domain.entities import Book, Borrower, Loan, is_blank
from lendctl.domain.errors import ConstraintViolationError, RecordNotFoundError
from lendctl.domain.results import LibraryActionResult
from lendctl.services._helpers import today_iso
from lendctl.services.base import BaseService

logger = logging.getLogger(__name__)


class LibraryService(BaseService):
    """Domain operations on borrowers, books, and loans."""

    # ------------------------------------------------------------------
    # Borrowers
    # ------------------------------------------------------------------

    def register_borrower(self, name: str) -> LibraryActionResult:
        """Register a new borrower called *name*.

        Returns SUCCESS once a row exists for *name*, ALREADY_REGISTERED if
        one existed before the call, FAILURE for an empty name or a save
        that did not produce an id.
        """
        # ── VALIDATE ─────────────────────────────────────────
        if is_blank(name):
            logger.debug("register_borrower: empty name rejected")
            return LibraryActionResult.FAILURE

        # ── CHECK_EXISTING ───────────────────────────────────
        if self._persistence.search_borrower_data_by_name(name) is not None:
            return LibraryActionResult.ALREADY_REGISTERED

        # ── SAVE ─────────────────────────────────────────────
        try:
            new_id = self._persistence.save_new_borrower(name)
        except ConstraintViolationError:
            # Another caller registered the same name between check and save.
            return LibraryActionResult.ALREADY_REGISTERED

        if new_id <= 0:
            return LibraryActionResult.FAILURE
        logger.debug("Registered borrower %d", new_id)
        return LibraryActionResult.SUCCESS

    def update_borrower(self, borrower_id: int, new_name: str) -> LibraryActionResult:
        """Rename borrower *borrower_id* to *new_name*.

        NOT_FOUND if the id is unknown; ALREADY_REGISTERED if *new_name*
        belongs to a different borrower.
        """
        if is_blank(new_name):
            return LibraryActionResult.FAILURE
        try:
            self._persistence.update_borrower(borrower_id, new_name)
        except RecordNotFoundError:
            return LibraryActionResult.NOT_FOUND
        except ConstraintViolationError:
            return LibraryActionResult.ALREADY_REGISTERED
        return LibraryActionResult.SUCCESS

    def get_borrower_name(self, borrower_id: int) -> str | LibraryActionResult:
        """Current name of *borrower_id*, or NOT_FOUND."""
        try:
            return self._persistence.get_borrower_name(borrower_id)
        except RecordNotFoundError:
            return LibraryActionResult.NOT_FOUND

    def search_borrower_by_name(self, name: str) -> Borrower | LibraryActionResult:
        """Borrower whose name is exactly *name*, or NOT_FOUND."""
        if is_blank(name):
            return LibraryActionResult.NOT_FOUND
        borrower = self._persistence.search_borrower_data_by_name(name)
        if borrower is None:
            return LibraryActionResult.NOT_FOUND
        return borrower

    # ------------------------------------------------------------------
    # Books
    # ------------------------------------------------------------------

    def register_book(self, title: str) -> LibraryActionResult:
        """Catalogue a new book titled *title*. Same outcomes as register_borrower."""
        if is_blank(title):
            return LibraryActionResult.FAILURE

        if self._persistence.search_books_by_title(title) is not None:
            return LibraryActionResult.ALREADY_REGISTERED

        try:
            new_id = self._persistence.save_new_book(title)
        except ConstraintViolationError:
            return LibraryActionResult.ALREADY_REGISTERED

        if new_id <= 0:
            return LibraryActionResult.FAILURE
        logger.debug("Registered book %d", new_id)
        return LibraryActionResult.SUCCESS

    def search_book_by_title(self, title: str) -> Book | LibraryActionResult:
        """Book whose title is exactly *title*, or NOT_FOUND."""
        if is_blank(title):
            return LibraryActionResult.NOT_FOUND
        book = self._persistence.search_books_by_title(title)
        if book is None:
            return LibraryActionResult.NOT_FOUND
        return book

    # ------------------------------------------------------------------
    # Lending
    # ------------------------------------------------------------------

    def lend_book(
        self,
        title: str,
        borrower_name: str,
        *,
        checkout_date: str | None = None,
    ) -> LibraryActionResult:
        """Record that *borrower_name* takes out the book *title*.

        Pipeline: FIND_BOOK → FIND_BORROWER → CHECK_LOAN → SAVE → RESPOND
        """
        book = self._persistence.search_books_by_title(title)
        if book is None:
            return LibraryActionResult.BOOK_NOT_REGISTERED

        borrower = self._persistence.search_borrower_data_by_name(borrower_name)
        if borrower is None:
            return LibraryActionResult.BORROWER_NOT_REGISTERED

        if self._persistence.search_loan_by_book(book) is not None:
            return LibraryActionResult.BOOK_CHECKED_OUT

        try:
            self._persistence.save_new_loan(book, borrower, checkout_date or today_iso())
        except ConstraintViolationError:
            return LibraryActionResult.BOOK_CHECKED_OUT
        logger.debug("Lent book %d to borrower %d", book.id, borrower.id)
        return LibraryActionResult.SUCCESS

    def find_loan(self, title: str) -> Loan | LibraryActionResult:
        """Who holds the book *title*: the open Loan, or NOT_FOUND."""
        book = self._persistence.search_books_by_title(title)
        if book is None:
            return LibraryActionResult.NOT_FOUND
        loan = self._persistence.search_loan_by_book(book)
        if loan is None:
            return LibraryActionResult.NOT_FOUND
        return loan
