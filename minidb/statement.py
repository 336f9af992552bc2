"""Parsing and running the insert and select statements."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from minidb.rows import EMAIL_SIZE, USERNAME_SIZE, Row, Table

_INT32 = 1 << 32
_LONG_MIN = -(1 << 63)
_LONG_MAX = (1 << 63) - 1
_C_SPACE = " \t\n\v\f\r"


class StatementType(enum.Enum):
    INSERT = "insert"
    SELECT = "select"


@dataclass(frozen=True)
class Statement:
    """A prepared statement; only inserts carry a row."""

    type: StatementType
    row_to_insert: Row | None = None


class PrepareError(Exception):
    """A line that could not be turned into a statement."""


class SyntaxErrorInStatement(PrepareError):
    def __init__(self) -> None:
        super().__init__("Syntax error. Could not parse statement.")


class NegativeIdError(PrepareError):
    def __init__(self) -> None:
        super().__init__("ID must be positive.")


class StringTooLongError(PrepareError):
    def __init__(self) -> None:
        super().__init__("String is too long.")


class UnrecognizedStatementError(PrepareError):
    def __init__(self, line: str) -> None:
        super().__init__(f"Unrecognized keyword at start of '{line}'.")
        self.line = line


def _atoi(text: str) -> int:
    """Read a leading integer as the C library does, wrapped to 32 bits."""
    text = text.lstrip(_C_SPACE)
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for char in text:
        if not "0" <= char <= "9":
            break
        digits += char
    value = sign * int(digits) if digits else 0
    value = max(_LONG_MIN, min(_LONG_MAX, value))
    value %= _INT32
    return value - _INT32 if value >= _INT32 // 2 else value


def prepare_insert(line: str) -> Statement:
    """Parse ``insert <id> <username> <email>``."""
    tokens = [token for token in line.split(" ") if token]
    if len(tokens) < 4:
        raise SyntaxErrorInStatement()
    _, id_text, username, email = tokens[:4]
    row_id = _atoi(id_text)
    if row_id < 0:
        raise NegativeIdError()
    if len(username.encode("utf-8")) > USERNAME_SIZE:
        raise StringTooLongError()
    if len(email.encode("utf-8")) > EMAIL_SIZE:
        raise StringTooLongError()
    return Statement(StatementType.INSERT, Row(row_id, username, email))


def prepare_statement(line: str) -> Statement:
    """Turn one input line into a statement."""
    if line.startswith("insert"):
        return prepare_insert(line)
    if line == "select":
        return Statement(StatementType.SELECT)
    raise UnrecognizedStatementError(line)


def execute_statement(statement: Statement, table: Table) -> list[Row]:
    """Run ``statement`` on ``table`` and return the rows it selects."""
    if statement.type is StatementType.INSERT:
        if statement.row_to_insert is None:
            raise ValueError("an insert statement needs a row")
        table.insert(statement.row_to_insert)
        return []
    return list(table.rows())