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

from collections.abc import Callable, Iterator
from contextlib import contextmanager

from ..core.models import Align, Cell, Font, TextProps
from .renderer import Renderer

Measure = Callable[[str], float]


def font_line_height(size_pt: float, scale_factor: float) -> float:
    """Height of one text line in user units for a font size in points."""
    return float(size_pt) / float(scale_factor)


def wrap_words(measure: Measure, text: str, max_width: float) -> list[str]:
    words = text.split()
    if not words:
        return []
    wrapped: list[str] = []
    current = ""
    for word in words:
        candidate = word if not current else f"{current} {word}"
        if measure(candidate) <= max_width:
            current = candidate
            continue
        if current:
            wrapped.append(current)
        # An over-wide word still gets a line of its own; words are never split.
        current = word
    wrapped.append(current)
    return wrapped


def truncate_to_width(measure: Measure, text: str, max_width: float) -> str:
    truncated = text
    while truncated and measure(truncated) > max_width:
        truncated = truncated[:-1]
    return truncated.rstrip()


def aligned_x(align: Align, cell_x: float, cell_width: float, line_width: float) -> float:
    if align == Align.CENTER:
        return cell_x + (cell_width - line_width) / 2.0
    if align == Align.RIGHT:
        return cell_x + cell_width - line_width
    return cell_x


class TextFlow:
    def __init__(self, renderer: Renderer) -> None:
        self.renderer = renderer

    def line_height(self, props: TextProps) -> float:
        return font_line_height(props.size, self.renderer.scale_factor)

    def line_count(self, text: str, props: TextProps, column_width: float) -> int:
        if not text.strip():
            return 0
        if props.extrapolate:
            return 1
        return len(self.wrap(text, props, column_width))

    def wrap(self, text: str, props: TextProps, column_width: float) -> list[str]:
        if not text.strip():
            return []
        with self._font(props.font):
            if props.extrapolate:
                return [
                    truncate_to_width(self.renderer.measure_string_width, text, column_width)
                ]
            return wrap_words(self.renderer.measure_string_width, text, column_width)

    def block_height(self, text: str, props: TextProps, column_width: float) -> float:
        lines = self.line_count(text, props, column_width)
        if lines == 0:
            return 0.0
        return lines * self.line_height(props) + (lines - 1) * props.vertical_padding

    def render(self, text: str, props: TextProps, cell: Cell) -> int:
        """Draw ``text`` inside ``cell`` and return the number of lines drawn."""
        lines = self.wrap(text, props, cell.width)
        if not lines:
            return 0
        step = self.line_height(props) + props.vertical_padding
        previous_color = self.renderer.get_text_color()
        with self._font(props.font):
            self.renderer.set_text_color(props.color)
            try:
                for index, line in enumerate(lines):
                    if props.align == Align.LEFT:
                        x = cell.x
                    else:
                        width = self.renderer.measure_string_width(line)
                        x = aligned_x(props.align, cell.x, cell.width, width)
                    y = cell.y + props.top + index * step
                    self.renderer.draw_text(x, y, line)
            finally:
                self.renderer.set_text_color(previous_color)
        return len(lines)

    @contextmanager
    def _font(self, font: Font) -> Iterator[None]:
        previous = self.renderer.get_font()
        self.renderer.set_font(font)
        try:
            yield
        finally:
            self.renderer.set_font(previous)


__all__ = [
    "TextFlow",
    "aligned_x",
    "font_line_height",
    "truncate_to_width",
    "wrap_words",
]
