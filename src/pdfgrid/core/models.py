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

from dataclasses import dataclass, field
from enum import Enum

from PIL import ImageColor


class Orientation(str, Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class PageSize(str, Enum):
    A3 = "A3"
    A4 = "A4"
    A5 = "A5"
    LETTER = "Letter"
    LEGAL = "Legal"


class Align(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class FontFamily(str, Enum):
    HELVETICA = "helvetica"
    ARIAL = "arial"
    COURIER = "courier"
    TIMES = "times"


class FontStyle(str, Enum):
    NORMAL = ""
    BOLD = "B"
    ITALIC = "I"
    BOLD_ITALIC = "BI"


class Extension(str, Enum):
    JPG = "jpg"
    JPEG = "jpeg"
    PNG = "png"


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not 0 <= int(value) <= 255:
                raise ValueError(f"color {name} must be within 0..255, got {value}")

    @classmethod
    def black(cls) -> "Color":
        return cls(0, 0, 0)

    @classmethod
    def parse(cls, value: str) -> "Color":
        """Build a color from a CSS-style name or hex string (``"#c8c8c8"``)."""
        rgb = ImageColor.getrgb(value.strip())
        return cls(int(rgb[0]), int(rgb[1]), int(rgb[2]))

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)


@dataclass(frozen=True)
class Margins:
    left: float
    top: float
    right: float
    bottom: float


@dataclass(frozen=True)
class Font:
    family: FontFamily = FontFamily.HELVETICA
    style: FontStyle = FontStyle.NORMAL
    size: float = 10.0


@dataclass(frozen=True)
class TextProps:
    family: FontFamily = FontFamily.HELVETICA
    style: FontStyle = FontStyle.NORMAL
    size: float = 10.0
    align: Align = Align.LEFT
    top: float = 0.0
    extrapolate: bool = False
    vertical_padding: float = 0.0
    color: Color = field(default_factory=Color.black)

    @property
    def font(self) -> Font:
        return Font(family=self.family, style=self.style, size=self.size)

    @classmethod
    def from_font(
        cls,
        font: Font,
        *,
        align: Align = Align.LEFT,
        top: float = 0.0,
    ) -> "TextProps":
        return cls(family=font.family, style=font.style, size=font.size, align=align, top=top)


@dataclass(frozen=True)
class RectProps:
    left: float = 0.0
    top: float = 0.0
    center: bool = False
    percent: float = 100.0


@dataclass(frozen=True)
class Proportion:
    width: float = 1.0
    height: float = 0.2


@dataclass(frozen=True)
class BarcodeProps:
    left: float = 0.0
    top: float = 0.0
    center: bool = False
    percent: float = 100.0
    proportion: Proportion = field(default_factory=Proportion)


@dataclass(frozen=True)
class TableProps:
    header_font: Font = field(default_factory=lambda: Font(style=FontStyle.BOLD))
    content_font: Font = field(default_factory=Font)
    align: Align = Align.LEFT
    alternated_background: Color | None = None
    header_content_space: float = 4.0
    line: bool = False
    cell_padding: float = 0.0


@dataclass(frozen=True)
class Cell:
    x: float
    y: float
    width: float
    height: float
    index: int
    count: int


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class ImageHandle:
    name: str
    width: float
    height: float


__all__ = [
    "Align",
    "BarcodeProps",
    "Cell",
    "Color",
    "Extension",
    "Font",
    "FontFamily",
    "FontStyle",
    "ImageHandle",
    "Margins",
    "Orientation",
    "PageSize",
    "Proportion",
    "Rect",
    "RectProps",
    "TableProps",
    "TextProps",
]
