# minidb

This package provides two small in-memory databases. You can drive either one
from the terminal or use it from Python.

## Installation

```
pip install .
```

## Key-value shell

`minidb-kv` starts an interactive prompt. A chained hash table backs it,
with 128 buckets and djb2 hashing.

```
$ minidb-kv
Welcome to mydb > type commands like: SET key value, GET key, DEL key
> SET greeting hello world
OK
> GET greeting
hello world
> DEL greeting
Deleted.
> GET greeting
NULL
> EXIT
```

The commands are:

- `SET key value` stores a value under a key. The value is the rest of the
  line, spaces included.
- `GET key` prints the value stored under the key. It prints `NULL` when the
  key has no value.
- `DEL key` removes the key. It prints `Deleted.` even when the key was not
  present.
- `EXIT` stops the shell.

If a command is missing its arguments, the shell prints a usage line. Any other
word makes it print `Unknown command. Try: SET, GET, DEL, EXIT`.

The shell reads input in pieces of at most 255 characters. A longer line is
therefore handled as several commands. The shell stops at `EXIT` or at end of
input.

From Python:

```python
from minidb.hashtable import HashTable, djb2_hash

table = HashTable()          # 128 buckets; HashTable(size) for another count
table.put("name", "value")
table.get("name")            # "value"
"name" in table              # True
len(table)                   # 1
list(table)                  # ["name"]
table.bucket_index("name")   # djb2_hash("name") % table.size
table.delete("name")
table.get("name")            # None
```

`djb2_hash` computes the 64-bit djb2 hash over the UTF-8 bytes of a string.
`HashTable(size)` raises `ValueError` when the size is not positive.

## Row store prompt

`minidb-sql` starts a `db >` prompt over a paged table of rows. Each row has
three fields:

- a 32-bit integer id;
- a username of up to 32 bytes;
- an email of up to 255 bytes.

```
$ minidb-sql
db >insert 1 alice alice@example.com
Executed.
db >select
(1, alice, alice@example.com)
Executed.
db >.exit
```

The statements are:

- `insert <id> <username> <email>` appends a row.
  - It reports `Syntax error. Could not parse statement.` when a field is
    missing.
  - It reports `ID must be positive.` for a negative id.
  - It reports `String is too long.` for an over-long username or email.
  - The id is read as a leading integer. Text that does not start with digits
    counts as 0.
  - The table holds 1400 rows: 100 pages of 4096 bytes. After that, the
    statement reports ` Error: Table full.`
- `select` prints every row in insertion order.
- `.exit` leaves the prompt with exit status 0.

Any other input is reported as `Unrecognized keyword at start of '...'.` When
input runs out, the prompt prints `Can't read input` and exits with status 1.

From Python:

```python
from minidb.rows import Row, Table, serialize_row, deserialize_row
from minidb.statement import prepare_statement, execute_statement

table = Table()
execute_statement(prepare_statement("insert 1 alice alice@example.com"), table)
execute_statement(prepare_statement("select"), table)
# [Row(id=1, username='alice', email='alice@example.com')]
list(table.rows())     # the same rows, as an iterator
len(table)             # 1

data = serialize_row(Row(2, "bob", "bob@example.com"))   # 291 bytes
deserialize_row(data)  # Row(id=2, username='bob', email='bob@example.com')
```

`prepare_statement` raises subclasses of `minidb.statement.PrepareError` when
a line cannot be prepared:

- `SyntaxErrorInStatement`
- `NegativeIdError`
- `StringTooLongError`
- `UnrecognizedStatementError`

`Table.insert` raises `minidb.rows.TableFullError` when the table is full.
`serialize_row` raises `ValueError` when a field does not fit.

## What it does not do

Both databases live in memory only. Nothing is written to disk, and all data
is lost when the prompt or shell exits. The row store has no persistence,
indexing or query language beyond `insert` and `select`.

## Running the tests

```
pip install .[test]
pytest
```