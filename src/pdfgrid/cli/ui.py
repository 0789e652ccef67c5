#!/usr/bin/env python3
from __future__ import annotations

import sys
from collections.abc import Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

THEME = Theme(
    {
        "title": "bold cyan",
        "accent": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "bold red",
        "muted": "dim",
    }
)


def _is_terminal(*, stderr: bool) -> bool:
    stream = sys.__stderr__ if stderr else sys.__stdout__
    if stream is None:
        return False
    try:
        return bool(stream.isatty())
    except (OSError, ValueError):
        return False


console = Console(theme=THEME, force_terminal=_is_terminal(stderr=False))
console_err = Console(stderr=True, theme=THEME, force_terminal=_is_terminal(stderr=True))


def build_kv_table(rows: Sequence[tuple[str, str]], *, title: str | None = None) -> Table:
    table = Table(title=title, title_style="title", show_header=False, box=box.SIMPLE)
    table.add_column("Setting", style="accent", no_wrap=True)
    table.add_column("Value")
    for key, value in rows:
        table.add_row(key, Text(value))
    return table


def print_completion_panel(title: str, items: Sequence[str], *, quiet: bool) -> None:
    if quiet:
        return
    lines = Text("\n").join(Text(f"- {item}") for item in items)
    console.print(
        Panel(lines, title=title, title_align="left", border_style="success", box=box.ROUNDED)
    )


__all__ = ["THEME", "build_kv_table", "console", "console_err", "print_completion_panel"]
