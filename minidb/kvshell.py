"""Interactive shell for the key-value store: SET, GET, DEL and EXIT."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from minidb.hashtable import HashTable

INPUT_SIZE = 256
TABLE_SIZE = 128
WELCOME = "Welcome to mydb > type commands like: SET key value, GET key, DEL key"
PROMPT = "> "


def _next_token(text: str, pos: int) -> tuple[str | None, int]:
    """Split off the next space-delimited token starting at ``pos``."""
    while pos < len(text) and text[pos] == " ":
        pos += 1
    if pos >= len(text):
        return None, pos
    end = text.find(" ", pos)
    if end == -1:
        return text[pos:], len(text)
    return text[pos:end], end + 1


def handle_line(table: HashTable, line: str) -> str | None:
    """Run one command line against ``table``.

    Returns the reply text ("" when there is nothing to print), or None
    when the command asks the shell to stop.
    """
    line = line.split("\n", 1)[0]
    cmd, pos = _next_token(line, 0)
    if cmd is None:
        return ""
    if cmd == "SET":
        key, pos = _next_token(line, pos)
        value = line[pos:] if key is not None and pos < len(line) else None
        if key is None or value is None:
            return "Usage: SET key value"
        table.put(key, value)
        return "OK"
    if cmd == "GET":
        key, _ = _next_token(line, pos)
        if key is None:
            return "Usage: GET key"
        value = table.get(key)
        return value if value is not None else "NULL"
    if cmd == "DEL":
        key, _ = _next_token(line, pos)
        if key is None:
            return "Usage: DEL key"
        table.delete(key)
        return "Deleted."
    if cmd == "EXIT":
        return None
    return "Unknown command. Try: SET, GET, DEL, EXIT"


def _reads(lines: Iterable[str]) -> Iterator[str]:
    """Cut input into reads of at most INPUT_SIZE - 1 characters each."""
    limit = INPUT_SIZE - 1
    for line in lines:
        while line:
            cut = line.find("\n")
            stop = len(line) if cut == -1 else cut + 1
            stop = min(stop, limit)
            yield line[:stop]
            line = line[stop:]


def run(lines: Iterable[str], out: TextIO) -> None:
    """Read commands from ``lines`` and write replies to ``out``."""
    table = HashTable(TABLE_SIZE)
    out.write(WELCOME + "\n")
    reads = _reads(lines)
    while True:
        out.write(PROMPT)
        chunk = next(reads, None)
        if chunk is None:
            break
        reply = handle_line(table, chunk)
        if reply is None:
            break
        if reply:
            out.write(reply + "\n")


def main(argv: list[str] | None = None) -> int:
    """Start the shell on standard input and output."""
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())