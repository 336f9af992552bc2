import pytest

from minidb.rows import (
    EMAIL_SIZE,
    ROW_SIZE,
    ROWS_PER_PAGE,
    TABLE_MAX_ROWS,
    USERNAME_SIZE,
    Row,
    Table,
    TableFullError,
    deserialize_row,
    serialize_row,
)


def test_serialize_round_trip():
    row = Row(7, "alice", "alice@example.com")
    data = serialize_row(row)
    assert len(data) == ROW_SIZE
    assert deserialize_row(data) == row


def test_id_is_little_endian_at_start():
    data = serialize_row(Row(1, "a", "b"))
    assert data[:4] == b"\x01\x00\x00\x00"


def test_full_width_fields_round_trip():
    row = Row(3, "u" * USERNAME_SIZE, "e" * EMAIL_SIZE)
    assert deserialize_row(serialize_row(row)) == row


def test_serialize_rejects_long_username():
    with pytest.raises(ValueError):
        serialize_row(Row(1, "u" * (USERNAME_SIZE + 1), "x@example.com"))


def test_serialize_rejects_out_of_range_id():
    with pytest.raises(ValueError):
        serialize_row(Row(2**31, "a", "b"))


def test_deserialize_rejects_wrong_length():
    with pytest.raises(ValueError):
        deserialize_row(b"\0" * (ROW_SIZE - 1))


def test_row_slot_has_row_size():
    table = Table()
    assert len(table.row_slot(0)) == ROW_SIZE
    assert len(table.row_slot(ROWS_PER_PAGE)) == ROW_SIZE


def test_row_slot_out_of_range():
    with pytest.raises(IndexError):
        Table().row_slot(TABLE_MAX_ROWS)


def test_rows_across_pages_keep_order():
    table = Table()
    inserted = [Row(i, f"user{i}", f"user{i}@example.com") for i in range(ROWS_PER_PAGE + 3)]
    for row in inserted:
        table.insert(row)
    assert list(table.rows()) == inserted
    assert len(table) == len(inserted)


def test_table_full():
    table = Table()
    for i in range(TABLE_MAX_ROWS):
        table.insert(Row(i, "u", "e@example.com"))
    with pytest.raises(TableFullError):
        table.insert(Row(0, "u", "e@example.com"))
    assert table.num_rows == TABLE_MAX_ROWS