"""Tests for the Rich rendering helpers."""

import io

from rich.console import Console

from npminspect.rich_utils.formatters import (
    PLAIN_SYMBOLS,
    build_table,
    fail,
    kv,
    print_table,
    symbols,
    to_json,
)


def make_console():
    return Console(file=io.StringIO(), width=80, no_color=True, force_terminal=False)


def test_symbols_switch():
    assert symbols(plain=True) is PLAIN_SYMBOLS
    assert symbols()["ok"] == "✔"


def test_to_json_matches_js_layout():
    assert to_json({"ok": True, "data": ["a"]}) == '{\n  "ok": true,\n  "data": [\n    "a"\n  ]\n}'


def test_build_table_columns_from_first_row():
    table = build_table([{"name": "a", "range": "1"}, {"name": "b", "range": None}])
    assert [column.header for column in table.columns] == ["name", "range"]
    assert table.row_count == 2


def test_print_table_skips_empty_rows():
    console = make_console()
    print_table(console, [])
    assert console.file.getvalue() == ""


def test_plain_table_uses_ascii():
    console = make_console()
    print_table(console, [{"version": "1.0.0"}], plain=True)
    output = console.file.getvalue()
    assert "1.0.0" in output
    assert output.startswith("+")


def test_markup_is_not_interpreted():
    console = make_console()
    fail(console, "bad [bold]value[/bold]", plain=True)
    assert "ERR bad [bold]value[/bold]" in console.file.getvalue()


def test_kv_line():
    assert kv("Version", "1.0.0", plain=True).plain == " - Version        1.0.0"
