"""Interactive prompt for the row table: insert, select and .exit."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from minidb.rows import Row, Table, TableFullError
from minidb.statement import PrepareError, execute_statement, prepare_statement

PROMPT = "db >"


def format_row(row: Row) -> str:
    """Render a row as ``(id, username, email)``."""
    return f"({row.id}, {row.username}, {row.email})"


def _reads(lines: Iterable[str]) -> Iterator[str]:
    """Yield one read per line, each keeping its trailing newline."""
    for chunk in lines:
        while chunk:
            cut = chunk.find("\n")
            stop = len(chunk) if cut == -1 else cut + 1
            yield chunk[:stop]
            chunk = chunk[stop:]


def run(lines: Iterable[str], out: TextIO) -> int:
    """Read statements from ``lines``, write results to ``out``.

    Returns 0 after ``.exit`` and 1 when input runs out.
    """
    table = Table()
    reads = _reads(lines)
    while True:
        out.write(PROMPT)
        raw = next(reads, None)
        if raw is None:
            out.write("Can't read input\n")
            return 1
        # The last character of each read is taken to be its newline.
        text = raw[:-1]
        if text == ".exit":
            return 0
        try:
            statement = prepare_statement(text)
        except PrepareError as exc:
            out.write(f"{exc}\n")
            continue
        try:
            rows = execute_statement(statement, table)
        except TableFullError:
            out.write(" Error: Table full.\n")
            continue
        for row in rows:
            out.write(format_row(row) + "\n")
        out.write("Executed.\n")


def main(argv: list[str] | None = None) -> int:
    """Start the prompt on standard input and output."""
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())