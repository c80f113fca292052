"""Lending records: borrowers, books, and the loans that join them.

Entities carry data only. Ids are assigned by the persistence layer on
creation and never change afterwards.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Borrower(BaseModel):
    """A person registered to take books out."""

    model_config = {"frozen": True}

    id: int = Field(gt=0)
    name: str = Field(min_length=1)


class Book(BaseModel):
    """A catalogued book."""

    model_config = {"frozen": True}

    id: int = Field(gt=0)
    title: str = Field(min_length=1)


class Loan(BaseModel):
    """A book currently held by a borrower."""

    model_config = {"frozen": True}

    id: int = Field(gt=0)
    book: Book
    borrower: Borrower
    checkout_date: str  # YYYY-MM-DD


def is_blank(text: str | None) -> bool:
    """True for None, empty, or whitespace-only text."""
    return text is None or not text.strip()
