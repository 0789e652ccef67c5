#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

import importlib.metadata
from collections.abc import Callable
from typing import Any

import typer
from rich.traceback import install as install_rich_traceback

from ...core.errors import PdfGridError
from ..ui import console_err


def _run_cli(func: Callable[[], Any], *, debug: bool) -> None:
    """Run a command body, turning expected failures into exit code 2."""
    if debug:
        install_rich_traceback(show_locals=True)
    try:
        func()
    except PdfGridError as exc:
        if debug:
            raise
        console_err.print(f"[error]Error:[/error] {type(exc).__name__}: {exc}")
        raise typer.Exit(code=2)
    except (OSError, ValueError, LookupError) as exc:
        if debug:
            raise
        console_err.print(f"[error]Error:[/error] {exc}")
        raise typer.Exit(code=2)


def _ctx_value(ctx: typer.Context, key: str) -> Any:
    return None if ctx.obj is None else ctx.obj.get(key)


def _get_version() -> str:
    try:
        return importlib.metadata.version("pdfgrid")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0"
