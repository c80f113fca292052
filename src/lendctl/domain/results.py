"""LibraryActionResult — the outcome tag of every business operation.

A closed set with no payload. Exactly one tag is produced per call.
"""

from __future__ import annotations

from enum import StrEnum


class LibraryActionResult(StrEnum):
    """Outcome of a library business operation."""

    SUCCESS = "success"
    ALREADY_REGISTERED = "already_registered"
    NOT_FOUND = "not_found"
    FAILURE = "failure"

    # Lending outcomes
    BOOK_NOT_REGISTERED = "book_not_registered"
    BORROWER_NOT_REGISTERED = "borrower_not_registered"
    BOOK_CHECKED_OUT = "book_checked_out"

    @property
    def ok(self) -> bool:
        """Whether this tag reports a completed operation."""
        return self is LibraryActionResult.SUCCESS
