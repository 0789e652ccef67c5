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

import base64
from collections.abc import Sequence
from pathlib import Path

from .config.loader import LayoutConfig
from .core.errors import LayoutError
from .core.models import Color, Font, Margins, Orientation, PageSize, TableProps
from .qr.codec import QrConfig
from .render.grid import Column, GridEngine, Row, RowBody
from .render.media import MediaPlacer
from .render.renderer import FpdfRenderer, Renderer
from .render.replay import Block, HeaderFooterReplay
from .render.table import TableGenerator
from .render.text import TextFlow


class Document:
    """A paginated document built from rows of equal-width columns.

    Rows are laid out top to bottom as they are declared. When a row does not
    fit above the footer, the footer is replayed, a new page starts and the
    header is replayed before the row is placed.
    """

    def __init__(
        self,
        orientation: Orientation = Orientation.PORTRAIT,
        page_size: PageSize = PageSize.A4,
        *,
        renderer: Renderer | None = None,
        margins: Margins | None = None,
        default_font: Font | None = None,
        qr_config: QrConfig | None = None,
    ) -> None:
        self.orientation = orientation
        self.default_font = default_font or Font()
        self.renderer = renderer or FpdfRenderer(
            orientation, page_size, margins=margins, font=self.default_font
        )
        if renderer is not None and margins is not None:
            self.renderer.set_page_margins(margins)
        self.replay = HeaderFooterReplay()
        self.text = TextFlow(self.renderer)
        self.media = MediaPlacer(self.renderer, self.text, qr_config or QrConfig())
        self.grid = GridEngine(
            self.renderer,
            self.replay,
            self.text,
            self.media,
            default_font=self.default_font,
        )
        self.tables = TableGenerator(self.grid, self.text)
        self._output: bytes | None = None

    @classmethod
    def from_config(cls, config: LayoutConfig, *, renderer: Renderer | None = None) -> Document:
        return cls(
            config.page.orientation,
            config.page.size,
            renderer=renderer,
            margins=config.page.margins,
            default_font=config.font.font,
            qr_config=config.qr_config,
        )

    # Layout

    def row(self, height: float, body: RowBody | None = None) -> None:
        """Declare a row of ``height``; ``body`` receives the row to add columns."""
        self.grid.layout_row(height, body)

    def line(self, space_height: float) -> None:
        """Declare a row holding a horizontal rule across its vertical middle."""

        def body(row: Row) -> None:
            row.col(Column.horizontal_line)

        self.grid.layout_row(space_height, body)

    def table_list(
        self,
        header: Sequence[str],
        contents: Sequence[Sequence[str]],
        props: TableProps | None = None,
    ) -> None:
        self.tables.create(header, contents, props)

    def add_page(self) -> None:
        """Force the following rows onto a new page."""
        if self.grid.finalized:
            raise LayoutError("document is already finalized")
        self.grid.start_page_content()
        self.grid.break_page()

    def register_header(self, block: Block) -> None:
        self._check_open()
        height = self.grid.measure(block)
        if height > self.grid.usable_height:
            raise LayoutError(
                f"header height {height:.2f} exceeds the usable page height "
                f"{self.grid.usable_height:.2f}"
            )
        self.replay.register_header(block, height)

    def register_footer(self, block: Block) -> None:
        """Register ``block`` as the footer; its rows are reserved on every page."""
        self._check_open()
        height = self.grid.measure(block)
        if height > self.grid.usable_height:
            raise LayoutError(
                f"footer height {height:.2f} exceeds the usable page height "
                f"{self.grid.usable_height:.2f}"
            )
        self.replay.register_footer(block, height)

    # State

    def set_border(self, on: bool) -> None:
        self.grid.border = bool(on)

    @property
    def border(self) -> bool:
        return self.grid.border

    def set_background_color(self, color: Color | None) -> None:
        self.grid.background = color

    @property
    def background_color(self) -> Color | None:
        return self.grid.background

    def set_page_margins(
        self,
        left: float,
        top: float,
        right: float,
        bottom: float | None = None,
    ) -> None:
        if min(left, top, right) < 0 or (bottom is not None and bottom < 0):
            raise ValueError("page margins cannot be negative")
        current = self.renderer.page_margins()
        self.renderer.set_page_margins(
            Margins(
                left=float(left),
                top=float(top),
                right=float(right),
                bottom=current.bottom if bottom is None else float(bottom),
            )
        )

    @property
    def page_margins(self) -> Margins:
        return self.renderer.page_margins()

    @property
    def page_size(self) -> tuple[float, float]:
        return self.renderer.page_size()

    @property
    def current_page(self) -> int:
        return self.grid.page

    @property
    def current_offset(self) -> float:
        return self.grid.offset

    # Output

    def output(self) -> bytes:
        if self._output is None:
            self.grid.finalize()
            self._output = self.renderer.output()
        return self._output

    def output_base64(self) -> str:
        return base64.b64encode(self.output()).decode("ascii")

    def save(self, path: str | Path) -> Path:
        data = self.output()
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
        return target

    def _check_open(self) -> None:
        if self.grid.finalized:
            raise LayoutError("document is already finalized")


__all__ = ["Document"]
