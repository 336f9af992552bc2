import io

from minidb.repl import PROMPT, format_row, run
from minidb.rows import TABLE_MAX_ROWS, Row


def _run(lines):
    out = io.StringIO()
    code = run(lines, out)
    return code, out.getvalue()


def test_format_row():
    assert format_row(Row(1, "alice", "alice@example.com")) == "(1, alice, alice@example.com)"


def test_insert_select_exit():
    code, output = _run(["insert 1 alice alice@example.com\n", "select\n", ".exit\n"])
    assert code == 0
    assert output == (
        PROMPT + "Executed.\n"
        + PROMPT + "(1, alice, alice@example.com)\nExecuted.\n"
        + PROMPT
    )


def test_end_of_input_fails():
    code, output = _run(["select\n"])
    assert code == 1
    assert output == PROMPT + "Executed.\n" + PROMPT + "Can't read input\n"


def test_other_dot_commands_are_unrecognized():
    code, output = _run([".tables\n", ".exit\n"])
    assert code == 0
    assert "Unrecognized keyword at start of '.tables'.\n" in output


def test_prepare_errors_are_reported():
    code, output = _run([
        "insert -1 a a@example.com\n",
        "insert 1 a\n",
        f"insert 1 {'u' * 33} a@example.com\n",
        ".exit\n",
    ])
    assert code == 0
    assert "ID must be positive.\n" in output
    assert "Syntax error. Could not parse statement.\n" in output
    assert "String is too long.\n" in output
    assert "Executed." not in output


def test_several_lines_in_one_chunk():
    code, output = _run(["insert 2 b b@example.com\nselect\n.exit\n"])
    assert code == 0
    assert "(2, b, b@example.com)\n" in output


def test_table_full_is_reported():
    lines = ["insert 1 a a@example.com\n"] * (TABLE_MAX_ROWS + 1) + [".exit\n"]
    code, output = _run(lines)
    assert code == 0
    assert output.count("Executed.\n") == TABLE_MAX_ROWS
    assert output.endswith(" Error: Table full.\n" + PROMPT)