"""Fixed-width row records stored in lazily allocated pages."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from dataclasses import dataclass

COLUMN_USERNAME_SIZE = 32
COLUMN_EMAIL_SIZE = 255

_ROW_FORMAT = struct.Struct(f"<i{COLUMN_USERNAME_SIZE}s{COLUMN_EMAIL_SIZE}s")

ID_SIZE = 4
USERNAME_SIZE = COLUMN_USERNAME_SIZE
EMAIL_SIZE = COLUMN_EMAIL_SIZE
ID_OFFSET = 0
USERNAME_OFFSET = ID_OFFSET + ID_SIZE
EMAIL_OFFSET = USERNAME_OFFSET + USERNAME_SIZE
ROW_SIZE = ID_SIZE + USERNAME_SIZE + EMAIL_SIZE

PAGE_SIZE = 4096
ROWS_PER_PAGE = PAGE_SIZE // ROW_SIZE
TABLE_MAX_PAGES = 100
TABLE_MAX_ROWS = ROWS_PER_PAGE * TABLE_MAX_PAGES


class TableFullError(Exception):
    """Raised when a row is inserted into a table that has no room left."""

    def __init__(self, message: str = "Table full.") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Row:
    """One record: an id, a user name and an e-mail address."""

    id: int
    username: str
    email: str


def _fixed(text: str, size: int, column: str) -> bytes:
    data = text.encode("utf-8")
    if len(data) > size:
        raise ValueError(f"{column} is {len(data)} bytes, at most {size} fit")
    return data


def serialize_row(row: Row) -> bytes:
    """Pack ``row`` into its ROW_SIZE-byte on-page form."""
    username = _fixed(row.username, USERNAME_SIZE, "username")
    email = _fixed(row.email, EMAIL_SIZE, "email")
    try:
        return _ROW_FORMAT.pack(row.id, username, email)
    except struct.error as exc:
        raise ValueError(f"id {row.id} does not fit in 32 bits") from exc


def _text(field: bytes) -> str:
    return field.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def deserialize_row(data: bytes | bytearray | memoryview) -> Row:
    """Unpack a row from its ROW_SIZE-byte on-page form."""
    if len(data) != ROW_SIZE:
        raise ValueError(f"a row takes {ROW_SIZE} bytes, got {len(data)}")
    row_id, username, email = _ROW_FORMAT.unpack(bytes(data))
    return Row(row_id, _text(username), _text(email))


class Table:
    """Rows appended one after another into pages of PAGE_SIZE bytes."""

    def __init__(self) -> None:
        self.num_rows = 0
        self._pages: list[bytearray | None] = [None] * TABLE_MAX_PAGES

    def row_slot(self, row_num: int) -> memoryview:
        """Return the writable bytes that hold row ``row_num``."""
        if not 0 <= row_num < TABLE_MAX_ROWS:
            raise IndexError(f"row {row_num} is outside the table")
        page_num, row_offset = divmod(row_num, ROWS_PER_PAGE)
        page = self._pages[page_num]
        if page is None:
            page = self._pages[page_num] = bytearray(PAGE_SIZE)
        start = row_offset * ROW_SIZE
        return memoryview(page)[start : start + ROW_SIZE]

    def insert(self, row: Row) -> None:
        """Append ``row`` to the table."""
        if self.num_rows >= TABLE_MAX_ROWS:
            raise TableFullError()
        self.row_slot(self.num_rows)[:] = serialize_row(row)
        self.num_rows += 1

    def rows(self) -> Iterator[Row]:
        """Yield every stored row in insertion order."""
        for row_num in range(self.num_rows):
            yield deserialize_row(self.row_slot(row_num))

    def __len__(self) -> int:
        return self.num_rows