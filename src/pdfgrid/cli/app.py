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

import typer

from ..config import init_user_config
from . import command_registry
from .core.common import _get_version
from .ui import console, console_err

app = typer.Typer(add_completion=False, help="pdfgrid: grid-based PDF layout.")


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"pdfgrid {_get_version()}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def cli(
    ctx: typer.Context,
    config: str | None = typer.Option(
        None,
        "--config",
        help="Use this TOML config file.",
        rich_help_panel="Global",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Show tracebacks instead of short error messages.",
        rich_help_panel="Debug",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Hide non-error output.",
        rich_help_panel="Global",
    ),
    init_config: bool = typer.Option(
        False,
        "--init-config",
        help="Copy defaults to the user config directory and exit.",
        is_eager=True,
        rich_help_panel="Config",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
        rich_help_panel="Info",
    ),
) -> None:
    _ = version
    if init_config:
        try:
            path = init_user_config()
        except OSError as exc:
            console_err.print(f"[error]Error:[/error] {exc}")
            raise typer.Exit(code=2)
        if not quiet:
            console.print(f"Config: {path}")
        raise typer.Exit()
    ctx.ensure_object(dict)
    ctx.obj.update({"config": config, "debug": debug, "quiet": quiet})
    if ctx.invoked_subcommand is None:
        console_err.print(
            "[error]Error:[/error] No subcommand provided. "
            "Run `pdfgrid --help` for available commands."
        )
        raise typer.Exit(code=2)


command_registry.register(app)


def main() -> None:
    app()
