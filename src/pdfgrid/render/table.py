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

from collections.abc import Sequence

from ..core.errors import TableShapeError
from ..core.models import TableProps, TextProps
from .geometry import width_per_col
from .grid import Column, ColumnBody, GridEngine, Row, RowBody
from .text import TextFlow


def validate_table_shape(header: Sequence[str], contents: Sequence[Sequence[str]]) -> None:
    expected = len(header)
    for index, row in enumerate(contents):
        if len(row) != expected:
            raise TableShapeError(
                f"table row {index} has {len(row)} columns, header has {expected}"
            )


class TableGenerator:
    def __init__(self, grid: GridEngine, text: TextFlow) -> None:
        self.grid = grid
        self.text = text

    def create(
        self,
        header: Sequence[str],
        contents: Sequence[Sequence[str]],
        props: TableProps | None = None,
    ) -> None:
        """Lay out a header row followed by one row per entry of ``contents``.

        Every row is sized from its tallest wrapped cell and goes through the
        regular row pagination, so long tables continue on the next page.
        Nothing is drawn when the shape check fails.
        """
        props = props or TableProps()
        validate_table_shape(header, contents)
        if not header or not contents:
            return

        column_width = width_per_col(self.grid.usable_width, len(header))
        padding = float(props.cell_padding)
        header_props = TextProps.from_font(props.header_font, align=props.align, top=padding)
        content_props = TextProps.from_font(props.content_font, align=props.align, top=padding)

        self.grid.layout_row(
            self.row_height(header, header_props, column_width, padding),
            _cells_body(header, header_props),
            outline=props.line,
        )
        if props.header_content_space > 0:
            self.grid.layout_row(props.header_content_space)

        for index, content in enumerate(contents):
            # Rows alternate starting unshaded.
            fill = props.alternated_background if index % 2 == 1 else None
            self.grid.layout_row(
                self.row_height(content, content_props, column_width, padding),
                _cells_body(content, content_props),
                outline=props.line,
                fill=fill,
            )

    def row_height(
        self,
        cells: Sequence[str],
        props: TextProps,
        column_width: float,
        padding: float = 0.0,
    ) -> float:
        tallest = max(
            (self.text.block_height(cell, props, column_width) for cell in cells), default=0.0
        )
        # Rows of empty cells keep a single line of height.
        return max(tallest, self.text.line_height(props)) + 2 * padding


def _cells_body(values: Sequence[str], props: TextProps) -> RowBody:
    def body(row: Row) -> None:
        for value in values:
            row.col(_cell_text(value, props))

    return body


def _cell_text(value: str, props: TextProps) -> ColumnBody:
    def draw(column: Column) -> None:
        column.text(value, props)

    return draw


__all__ = ["TableGenerator", "validate_table_shape"]
