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

from collections.abc import Callable
from pathlib import Path

from ..core.errors import LayoutError, ReplayOverflowError, RowHeightError
from ..core.models import (
    BarcodeProps,
    Cell,
    Color,
    Extension,
    Font,
    Margins,
    Rect,
    RectProps,
    TextProps,
)
from .geometry import column_x, width_per_col
from .media import MediaPlacer
from .renderer import Renderer
from .replay import Block, HeaderFooterReplay
from .text import TextFlow

# Tolerance for cursor comparisons against the page bottom
OFFSET_EPSILON = 1e-6

RowBody = Callable[["Row"], None]
ColumnBody = Callable[["Column"], None]


class GridEngine:
    """Turns row/column declarations into absolute cells and paginates.

    ``offset`` is the vertical write position relative to the top margin; it
    only grows within a page and returns to 0 on every new page.
    """

    def __init__(
        self,
        renderer: Renderer,
        replay: HeaderFooterReplay,
        text: TextFlow,
        media: MediaPlacer,
        *,
        default_font: Font | None = None,
    ) -> None:
        self.renderer = renderer
        self.replay = replay
        self.text = text
        self.media = media
        self.default_font = default_font or Font()
        self.offset = 0.0
        self.page = 0
        self.border = False
        self.background: Color | None = None
        self.finalized = False
        self._header_pending = True
        self._row_active = False
        self._measuring = False
        self._measured = 0.0

    @property
    def margins(self) -> Margins:
        return self.renderer.page_margins()

    @property
    def usable_width(self) -> float:
        width, _ = self.renderer.page_size()
        margins = self.margins
        return width - margins.left - margins.right

    @property
    def usable_height(self) -> float:
        _, height = self.renderer.page_size()
        margins = self.margins
        return height - margins.top - margins.bottom

    def layout_row(
        self,
        height: float,
        body: RowBody | None = None,
        *,
        outline: bool = False,
        fill: Color | None = None,
    ) -> None:
        if self._measuring:
            self._measured += float(height)
            return
        top = self.begin_row(height)
        row = Row(self, top, float(height))
        self._row_active = True
        try:
            if body is not None:
                body(row)
            row.render(outline=outline or self.border, fill=fill or self.background)
        finally:
            # A failing column still leaves its row on the page.
            self._row_active = False
            self.end_row(height)

    def begin_row(self, height: float) -> float:
        """Reserve ``height`` on the current page, breaking the page if needed.

        Returns the absolute top of the row.
        """
        if self.finalized:
            raise LayoutError("document is already finalized")
        if self._row_active:
            raise LayoutError("rows cannot be declared inside another row")
        height = float(height)
        usable = self.usable_height
        if height < 0:
            raise RowHeightError(f"row height cannot be negative, got {height}")
        if height > usable + OFFSET_EPSILON:
            raise RowHeightError(
                f"row height {height:.2f} exceeds the usable page height {usable:.2f}"
            )

        if self.replay.running is not None:
            if self.offset + height > usable + OFFSET_EPSILON:
                raise ReplayOverflowError(
                    f"{self.replay.running} content does not fit on page {self.page + 1}"
                )
            return self.row_top()

        self.start_page_content()
        if not self._fits(height):
            reserved = self.replay.header_height + self.replay.footer_height
            if reserved + height > usable + OFFSET_EPSILON:
                raise RowHeightError(
                    f"row height {height:.2f} does not fit between header and footer"
                )
            self.break_page()
            if not self._fits(height):
                raise RowHeightError(
                    f"row height {height:.2f} does not fit between header and footer"
                )
        return self.row_top()

    def end_row(self, height: float) -> None:
        self.offset += float(height)

    def row_top(self) -> float:
        return self.margins.top + self.offset

    def column(self, index: int, count: int, top: float, height: float) -> Cell:
        if count <= 0 or not 0 <= index < count:
            raise LayoutError(f"column index {index} is out of range for {count} columns")
        width = width_per_col(self.usable_width, count)
        return Cell(
            x=column_x(self.margins.left, width, index),
            y=top,
            width=width,
            height=height,
            index=index,
            count=count,
        )

    def start_page_content(self) -> None:
        # The first page gets its header right before the first caller row.
        if not self._header_pending:
            return
        self._header_pending = False
        self.replay.run_header()

    def break_page(self) -> None:
        if self.replay.running is not None:
            raise ReplayOverflowError(f"{self.replay.running} content cannot start a new page")
        self.replay.run_footer()
        self.renderer.add_page()
        self.page += 1
        self.offset = 0.0
        self._header_pending = False
        self.replay.run_header()

    def measure(self, block: Block) -> float:
        """Height the rows declared by ``block`` would consume, without drawing."""
        saved = (self.border, self.background)
        self._measuring = True
        self._measured = 0.0
        try:
            block()
        finally:
            self._measuring = False
            self.border, self.background = saved
        return self._measured

    def finalize(self) -> None:
        if self.finalized:
            return
        self.start_page_content()
        self.replay.run_footer()
        self.finalized = True

    def _fits(self, height: float) -> bool:
        limit = self.usable_height + OFFSET_EPSILON
        return self.offset + height + self.replay.footer_height <= limit


class Row:
    def __init__(self, grid: GridEngine, top: float, height: float) -> None:
        self._grid = grid
        self.top = top
        self.height = height
        self._columns: list[ColumnBody | None] = []

    @property
    def count(self) -> int:
        return len(self._columns)

    def col(self, body: ColumnBody | None = None) -> None:
        self._columns.append(body)

    def col_space(self) -> None:
        self._columns.append(None)

    def col_spaces(self, count: int) -> None:
        if count < 0:
            raise ValueError("column space count cannot be negative")
        self._columns.extend([None] * count)

    def render(self, *, outline: bool, fill: Color | None) -> None:
        renderer = self._grid.renderer
        count = len(self._columns)
        for index, body in enumerate(self._columns):
            cell = self._grid.column(index, count, self.top, self.height)
            if fill is not None:
                renderer.fill_rect(cell.x, cell.y, cell.width, cell.height, fill)
            if outline:
                renderer.stroke_rect(cell.x, cell.y, cell.width, cell.height)
            if body is not None:
                body(Column(self._grid, cell))


class Column:
    def __init__(self, grid: GridEngine, cell: Cell) -> None:
        self._grid = grid
        self.cell = cell

    def text(self, text: str, props: TextProps | None = None) -> int:
        props = props or TextProps.from_font(self._grid.default_font)
        return self._grid.text.render(text, props, self.cell)

    def signature(self, label: str, font: Font | None = None) -> None:
        self._grid.media.signature(label, self.cell, font)

    def image(self, path: str | Path, props: RectProps | None = None) -> Rect:
        return self._grid.media.image(path, self.cell, props or RectProps(center=True))

    def base64_image(
        self,
        data: str,
        extension: Extension | str,
        props: RectProps | None = None,
    ) -> Rect:
        return self._grid.media.base64_image(
            data, extension, self.cell, props or RectProps(center=True)
        )

    def qr_code(self, data: str | bytes, props: RectProps | None = None) -> Rect:
        return self._grid.media.qr_code(data, self.cell, props or RectProps(center=True))

    def barcode(self, code: str, props: BarcodeProps | None = None) -> Rect:
        return self._grid.media.barcode(code, self.cell, props or BarcodeProps(center=True))

    def horizontal_line(self) -> None:
        y = self.cell.y + self.cell.height / 2.0
        self._grid.renderer.draw_line(self.cell.x, y, self.cell.x + self.cell.width, y)


__all__ = ["Column", "GridEngine", "Row"]
