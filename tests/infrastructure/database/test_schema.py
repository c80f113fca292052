"""Tests for database schema definitions."""

import pytest
from sqlalchemy import create_engine, insert, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from lendctl.infrastructure.database.schema import books, borrowers, loans, metadata


def _in_memory_engine() -> Engine:
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine("sqlite:///:memory:")
    metadata.create_all(engine)
    return engine


class TestSchemaCreation:
    def test_all_tables_created(self) -> None:
        engine = _in_memory_engine()
        assert {"borrowers", "books", "loans"} <= set(inspect(engine).get_table_names())

    def test_create_all_is_idempotent(self) -> None:
        engine = _in_memory_engine()
        metadata.create_all(engine)
        assert "borrowers" in inspect(engine).get_table_names()

    def test_integer_primary_keys(self) -> None:
        inspector = inspect(_in_memory_engine())
        for table in ("borrowers", "books", "loans"):
            assert inspector.get_pk_constraint(table)["constrained_columns"] == ["id"]


class TestConstraints:
    def test_ids_assigned_from_one(self) -> None:
        engine = _in_memory_engine()
        with engine.begin() as conn:
            result = conn.execute(insert(borrowers).values(name="alice"))
            assert result.inserted_primary_key[0] == 1

    def test_borrower_name_unique(self) -> None:
        engine = _in_memory_engine()
        with engine.begin() as conn:
            conn.execute(insert(borrowers).values(name="alice"))
        with pytest.raises(IntegrityError), engine.begin() as conn:
            conn.execute(insert(borrowers).values(name="alice"))

    def test_book_title_unique(self) -> None:
        engine = _in_memory_engine()
        with engine.begin() as conn:
            conn.execute(insert(books).values(title="Dune"))
        with pytest.raises(IntegrityError), engine.begin() as conn:
            conn.execute(insert(books).values(title="Dune"))

    def test_one_loan_per_book(self) -> None:
        engine = _in_memory_engine()
        with engine.begin() as conn:
            conn.execute(insert(books).values(title="Dune"))
            conn.execute(insert(borrowers).values(name="alice"))
            conn.execute(insert(borrowers).values(name="bob"))
            conn.execute(insert(loans).values(book=1, borrower=1, checkout_date="2024-01-01"))
        with pytest.raises(IntegrityError), engine.begin() as conn:
            conn.execute(insert(loans).values(book=1, borrower=2, checkout_date="2024-01-02"))

    def test_name_not_nullable(self) -> None:
        columns = {c["name"]: c for c in inspect(_in_memory_engine()).get_columns("borrowers")}
        assert columns["name"]["nullable"] is False
