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

from ...config import load_layout_config, resolve_config_path
from ..core.common import _ctx_value, _run_cli
from ..ui import build_kv_table, console

_CONFIG_HELP = (
    "Show the active layout configuration.\n\n"
    "The file is taken from --config, then $PDFGRID_CONFIG, then the user config\n"
    "directory, falling back to the packaged defaults.\n\n"
    "Examples:\n"
    "  pdfgrid config\n"
    "  pdfgrid config --config ./layout.toml\n"
    "  pdfgrid config --print-path\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_CONFIG_HELP)(config)


def config(
    ctx: typer.Context,
    config: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Show this config file (overrides the default).",
        rich_help_panel="Config",
    ),
    print_path: bool = typer.Option(
        False,
        "--print-path",
        help="Print the resolved config path and exit.",
        rich_help_panel="Behavior",
    ),
) -> None:
    config_value = config or _ctx_value(ctx, "config")
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        if print_path:
            console.print(str(resolve_config_path(config_value)), markup=False, highlight=False)
            return
        layout = load_layout_config(config_value)
        margins = layout.page.margins
        rows = [
            ("Source", str(layout.source_path)),
            ("Page size", layout.page.size.value),
            ("Orientation", layout.page.orientation.value),
            (
                "Margins (mm)",
                f"left {margins.left:g}, top {margins.top:g}, "
                f"right {margins.right:g}, bottom {margins.bottom:g}",
            ),
            (
                "Font",
                f"{layout.font.family.value} {layout.font.style.name.lower()} "
                f"{layout.font.size:g}pt",
            ),
            ("QR error", layout.qr_config.error),
            ("QR scale", str(layout.qr_config.scale)),
            ("QR border", str(layout.qr_config.border)),
            ("QR modules", layout.qr_config.module_shape),
        ]
        console.print(build_kv_table(rows, title="Layout configuration"))

    _run_cli(_run, debug=debug_value)
