"""
Rendering helpers shared by the CLI commands.

Tables, boxed panels, key/value lines and status messages all honour the
``plain`` setting: ASCII borders and bracketed markers instead of
box-drawing characters and emoji.
"""
import json
from typing import Any, Dict, List, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

FANCY_SYMBOLS = {
    "dot": "•",
    "ok": "✔",
    "warn": "⚠",
    "fail": "✖",
    "info": "ℹ",
    "pkg": "📦",
    "gear": "⚙",
    "ver": "🧭",
    "arrow": "→",
}

PLAIN_SYMBOLS = {
    "dot": "-",
    "ok": "[OK]",
    "warn": "WARN",
    "fail": "ERR",
    "info": "[i]",
    "pkg": "[pkg]",
    "gear": "[cfg]",
    "ver": "[ver]",
    "arrow": ">",
}


def symbols(plain: bool = False) -> Dict[str, str]:
    return PLAIN_SYMBOLS if plain else FANCY_SYMBOLS


def to_json(data: Any) -> str:
    """Serialise a command result the way ``JSON.stringify(data, null, 2)`` would."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def build_table(rows: List[Dict[str, Any]], plain: bool = False) -> Table:
    """Build a bordered table whose columns are the keys of the first row."""
    table = Table(box=box.ASCII if plain else box.SQUARE, show_lines=False)
    columns = list(rows[0].keys()) if rows else []
    for column in columns:
        table.add_column(str(column), overflow="fold")
    for row in rows:
        table.add_row(*(Text("" if row.get(c) is None else str(row.get(c))) for c in columns))
    return table


def print_table(console: Console, rows: List[Dict[str, Any]], plain: bool = False) -> None:
    """Print ``rows`` as a table; nothing is printed for an empty list."""
    if not rows:
        return
    console.print(build_table(rows, plain=plain))


def kv(label: str, value: Any, plain: bool = False, label_width: int = 14) -> Text:
    """One ``• Label    value`` line."""
    line = Text(f" {symbols(plain)['dot']} ")
    line.append(label.ljust(label_width), style="bold")
    line.append(f" {value}")
    return line


def build_box(title: str, lines: Sequence[Any], width: int = 64, plain: bool = False, style: str = "cyan") -> Panel:
    """Titled panel around ``lines``, like a ``╔═╗`` box."""
    body = Text("\n").join(line if isinstance(line, Text) else Text(str(line)) for line in lines)
    return Panel(
        body,
        title=title,
        title_align="left",
        box=box.ASCII if plain else box.DOUBLE,
        width=width + 2,
        border_style=style,
    )


def banner(console: Console, title: str, subtitle: str = "", width: int = 60, plain: bool = False) -> None:
    """Centered double-bordered banner; suppressed in plain mode."""
    if plain:
        return
    text = Text(title, style="bold cyan", justify="center")
    if subtitle:
        text.append("\n" + subtitle, style="cyan")
    console.print(Panel(text, box=box.DOUBLE, width=width + 2, border_style="cyan"))


def divider(console: Console, width: int = 60, char: str = "=", style: str = "cyan") -> None:
    console.print(char * width, style=style)


def heading(console: Console, message: str, style: str = "bold cyan") -> None:
    console.print(Text(message, style=style))


def ok(console: Console, message: str, plain: bool = False) -> None:
    console.print(Text(f"{symbols(plain)['ok']} {message}", style="green"))


def warn(console: Console, message: str, plain: bool = False) -> None:
    console.print(Text(f"{symbols(plain)['warn']} {message}", style="yellow"))


def fail(console: Console, message: str, plain: bool = False) -> None:
    console.print(Text(f"{symbols(plain)['fail']} {message}", style="bold red"))
