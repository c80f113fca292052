"""Human/JSON output helpers.

The CLI reports one LibraryActionResult per command, optionally with the
record it found. The formatter adapts that pair to the requested output
mode.
"""

from __future__ import annotations

import json as _json
from typing import Any

from rich.markup import escape

from lendctl.domain.results import LibraryActionResult
from lendctl.output.console import create_console, get_output

_MESSAGES: dict[LibraryActionResult, str] = {
    LibraryActionResult.SUCCESS: "done",
    LibraryActionResult.ALREADY_REGISTERED: "already registered",
    LibraryActionResult.NOT_FOUND: "not found",
    LibraryActionResult.FAILURE: "operation failed",
    LibraryActionResult.BOOK_NOT_REGISTERED: "book is not registered",
    LibraryActionResult.BORROWER_NOT_REGISTERED: "borrower is not registered",
    LibraryActionResult.BOOK_CHECKED_OUT: "book is already checked out",
}


def describe(result: LibraryActionResult) -> str:
    """Short human-readable description of *result*."""
    return _MESSAGES[result]


def outcome_payload(
    op: str, result: LibraryActionResult, data: dict[str, Any] | None = None
) -> dict[str, Any]:
    """The JSON-serializable form of one command outcome."""
    return {
        "ok": result.ok,
        "op": op,
        "result": result.value,
        "data": data or {},
    }


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return _json.dumps(value, separators=(",", ":"))
    return str(value)


def format_outcome(
    op: str,
    result: LibraryActionResult,
    *,
    data: dict[str, Any] | None = None,
    json_output: bool = False,
) -> str:
    """Format a command outcome for display.

    Args:
        op: Name of the operation (e.g. ``"register_borrower"``).
        result: The action result tag.
        data: Record fields to show alongside the tag.
        json_output: If True, return JSON; otherwise return human-readable text.
    """
    if json_output:
        return _json.dumps(outcome_payload(op, result, data), indent=2)

    console = create_console(no_color=True)
    if result.ok:
        console.print(f"[lend.ok]OK[/]: [lend.op]{op}[/]")
        for key, value in (data or {}).items():
            console.print(f"  [lend.key]{key}[/]: {escape(_format_value(value))}")
    else:
        console.print(f"[lend.error]ERROR[/]: [lend.op]{op}[/] - {describe(result)}")
    return get_output(console).rstrip("\n")
