"""Contract tests run against every PersistenceLayer implementation."""

from __future__ import annotations

import pytest

from lendctl.domain.entities import Book, Borrower
from lendctl.domain.errors import ConstraintViolationError, RecordNotFoundError
from lendctl.domain.ports import PersistenceLayer
from lendctl.infrastructure.repositories import InMemoryPersistenceLayer, SqlPersistenceLayer

HITCHHIKER = "Hitchhiker's Guide to the Galaxy"
# Larger than any 64-bit primary key.
OVERSIZED_ID = 2**70


class TestImplementsProtocol:
    def test_sql(self, sql_persistence: SqlPersistenceLayer) -> None:
        assert isinstance(sql_persistence, PersistenceLayer)

    def test_memory(self, memory_persistence: InMemoryPersistenceLayer) -> None:
        assert isinstance(memory_persistence, PersistenceLayer)


class TestSaveNewBorrower:
    def test_first_borrower_gets_id_one(self, persistence: PersistenceLayer) -> None:
        assert persistence.save_new_borrower("alice") == 1

    def test_ids_are_sequential(self, persistence: PersistenceLayer) -> None:
        ids = [persistence.save_new_borrower(name) for name in ("alice", "bob", "carol")]
        assert ids == [1, 2, 3]
        assert persistence.count_borrowers() == 3

    def test_empty_name_rejected(self, persistence: PersistenceLayer) -> None:
        with pytest.raises(ValueError):
            persistence.save_new_borrower("")
        assert persistence.count_borrowers() == 0

    def test_duplicate_name_rejected(self, persistence: PersistenceLayer) -> None:
        persistence.save_new_borrower("alice")
        with pytest.raises(ConstraintViolationError):
            persistence.save_new_borrower("alice")
        assert persistence.count_borrowers() == 1


class TestUpdateBorrower:
    def test_update_then_get_name(self, persistence: PersistenceLayer) -> None:
        borrower_id = persistence.save_new_borrower("alice")
        persistence.update_borrower(borrower_id, "bob")
        assert persistence.get_borrower_name(borrower_id) == "bob"

    def test_id_is_stable_across_rename(self, persistence: PersistenceLayer) -> None:
        borrower_id = persistence.save_new_borrower("alice")
        persistence.update_borrower(borrower_id, "bob")
        assert persistence.search_borrower_data_by_name("bob") == Borrower(
            id=borrower_id, name="bob"
        )
        assert persistence.search_borrower_data_by_name("alice") is None

    def test_unknown_id(self, persistence: PersistenceLayer) -> None:
        with pytest.raises(RecordNotFoundError):
            persistence.update_borrower(99, "bob")

    def test_oversized_id(self, persistence: PersistenceLayer) -> None:
        persistence.save_new_borrower("alice")
        with pytest.raises(RecordNotFoundError):
            persistence.update_borrower(OVERSIZED_ID, "bob")
        assert persistence.search_borrower_data_by_name("alice") is not None

    def test_rename_to_taken_name(self, persistence: PersistenceLayer) -> None:
        persistence.save_new_borrower("alice")
        bob_id = persistence.save_new_borrower("bob")
        with pytest.raises(ConstraintViolationError):
            persistence.update_borrower(bob_id, "alice")
        assert persistence.get_borrower_name(bob_id) == "bob"

    def test_rename_to_same_name(self, persistence: PersistenceLayer) -> None:
        borrower_id = persistence.save_new_borrower("alice")
        persistence.update_borrower(borrower_id, "alice")
        assert persistence.get_borrower_name(borrower_id) == "alice"


class TestGetBorrowerName:
    def test_unknown_id(self, persistence: PersistenceLayer) -> None:
        with pytest.raises(RecordNotFoundError):
            persistence.get_borrower_name(1)

    def test_oversized_id(self, persistence: PersistenceLayer) -> None:
        with pytest.raises(RecordNotFoundError):
            persistence.get_borrower_name(OVERSIZED_ID)


class TestSearchBorrower:
    def test_finds_saved_borrower(self, persistence: PersistenceLayer) -> None:
        persistence.save_new_borrower("alice")
        found = persistence.search_borrower_data_by_name("alice")
        assert found is not None
        assert found.id == 1
        assert found.name == "alice"

    def test_empty_set_returns_none(self, persistence: PersistenceLayer) -> None:
        assert persistence.search_borrower_data_by_name("nobody") is None

    def test_match_is_exact(self, persistence: PersistenceLayer) -> None:
        persistence.save_new_borrower("alice")
        assert persistence.search_borrower_data_by_name("Alice") is None
        assert persistence.search_borrower_data_by_name("ali") is None


class TestBooks:
    def test_search_by_title(self, persistence: PersistenceLayer) -> None:
        assert persistence.save_new_book(HITCHHIKER) == 1
        book = persistence.search_books_by_title(HITCHHIKER)
        assert book == Book(id=1, title=HITCHHIKER)

    def test_unknown_title(self, persistence: PersistenceLayer) -> None:
        assert persistence.search_books_by_title("Dune") is None

    def test_duplicate_title_rejected(self, persistence: PersistenceLayer) -> None:
        persistence.save_new_book("Dune")
        with pytest.raises(ConstraintViolationError):
            persistence.save_new_book("Dune")
        assert persistence.count_books() == 1

    def test_empty_title_rejected(self, persistence: PersistenceLayer) -> None:
        with pytest.raises(ValueError):
            persistence.save_new_book("   ")


class TestLoans:
    def _book_and_borrower(self, persistence: PersistenceLayer) -> tuple[Book, Borrower]:
        persistence.save_new_book("Dune")
        persistence.save_new_borrower("alice")
        book = persistence.search_books_by_title("Dune")
        borrower = persistence.search_borrower_data_by_name("alice")
        assert book is not None
        assert borrower is not None
        return book, borrower

    def test_save_and_find_loan(self, persistence: PersistenceLayer) -> None:
        book, borrower = self._book_and_borrower(persistence)
        loan_id = persistence.save_new_loan(book, borrower, "2024-05-01")
        loan = persistence.search_loan_by_book(book)
        assert loan is not None
        assert loan.id == loan_id
        assert loan.book == book
        assert loan.borrower == borrower
        assert loan.checkout_date == "2024-05-01"

    def test_no_loan(self, persistence: PersistenceLayer) -> None:
        book, _ = self._book_and_borrower(persistence)
        assert persistence.search_loan_by_book(book) is None

    def test_book_lent_once(self, persistence: PersistenceLayer) -> None:
        book, borrower = self._book_and_borrower(persistence)
        persistence.save_new_loan(book, borrower, "2024-05-01")
        with pytest.raises(ConstraintViolationError):
            persistence.save_new_loan(book, borrower, "2024-05-02")

    def test_unknown_book_rejected(self, persistence: PersistenceLayer) -> None:
        _, borrower = self._book_and_borrower(persistence)
        with pytest.raises(ConstraintViolationError):
            persistence.save_new_loan(Book(id=42, title="Ghost"), borrower, "2024-05-01")

    def test_oversized_ids(self, persistence: PersistenceLayer) -> None:
        book, borrower = self._book_and_borrower(persistence)
        ghost = Book(id=OVERSIZED_ID, title="Ghost")
        assert persistence.search_loan_by_book(ghost) is None
        with pytest.raises(ConstraintViolationError):
            persistence.save_new_loan(ghost, borrower, "2024-05-01")
        with pytest.raises(ConstraintViolationError):
            persistence.save_new_loan(book, Borrower(id=OVERSIZED_ID, name="x"), "2024-05-01")
        assert persistence.search_loan_by_book(book) is None
