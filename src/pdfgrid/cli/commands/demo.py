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

import functools
from enum import Enum
from pathlib import Path

import typer

from ...config import load_layout_config
from ...demos import DEMOS
from ..core.common import _ctx_value, _run_cli
from ..ui import console, print_completion_panel

_DEMO_HELP = (
    "Render one of the bundled sample documents.\n\n"
    "Examples:\n"
    "  pdfgrid demo report                   # Writes report.pdf\n"
    "  pdfgrid demo label -o out/label.pdf   # Custom output path\n"
    "  pdfgrid demo certificate --image logo.png\n"
    "  pdfgrid demo report --base64 > report.b64"
)


class DemoName(str, Enum):
    CERTIFICATE = "certificate"
    REPORT = "report"
    LABEL = "label"


def register(app: typer.Typer) -> None:
    app.command(help=_DEMO_HELP)(demo)


def _run_demo(
    *,
    name: DemoName,
    output: Path | None,
    as_base64: bool,
    image: Path | None,
    config_value: str | None,
    quiet_value: bool,
) -> None:
    config = load_layout_config(config_value)
    document = DEMOS[name.value](config=config, image=image)
    if as_base64:
        console.print(document.output_base64(), soft_wrap=True, markup=False, highlight=False)
        return
    path = document.save(output or Path(f"{name.value}.pdf"))
    print_completion_panel(
        "Document ready",
        [f"Saved to {path}", f"Pages: {document.current_page + 1}"],
        quiet=quiet_value,
    )


def demo(
    ctx: typer.Context,
    name: DemoName = typer.Argument(..., help="Sample document to render."),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output PDF path (default: <name>.pdf).",
    ),
    as_base64: bool = typer.Option(
        False,
        "--base64",
        help="Print the PDF as base64 instead of writing a file.",
    ),
    image: Path | None = typer.Option(
        None,
        "--image",
        help="JPEG or PNG image placed in the document's image cells.",
    ),
    config: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Use a custom TOML configuration file.",
        rich_help_panel="Config",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress progress output.",
        rich_help_panel="Behavior",
    ),
) -> None:
    _run_cli(
        functools.partial(
            _run_demo,
            name=name,
            output=output,
            as_base64=as_base64,
            image=image,
            config_value=config or _ctx_value(ctx, "config"),
            quiet_value=quiet or bool(_ctx_value(ctx, "quiet")),
        ),
        debug=bool(_ctx_value(ctx, "debug")),
    )
