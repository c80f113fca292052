"""SQLAlchemy Core table definitions for the lendctl database.

Uniqueness on ``borrowers.name``, ``books.title``, and ``loans.book`` is
what keeps concurrent registrations and checkouts from double-writing:
the losing writer gets an IntegrityError instead of a second row.
"""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Index, Integer, MetaData, Table, Text

metadata = MetaData()

borrowers = Table(
    "borrowers",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False, unique=True),
)

books = Table(
    "books",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", Text, nullable=False, unique=True),
)

loans = Table(
    "loans",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    # One open loan per book.
    Column("book", Integer, ForeignKey("books.id"), nullable=False, unique=True),
    Column("borrower", Integer, ForeignKey("borrowers.id"), nullable=False),
    Column("checkout_date", Text, nullable=False),  # YYYY-MM-DD
)

Index("ix_loans_borrower", loans.c.borrower)
