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

from .core.errors import (
    BarcodeError,
    BarcodeProportionError,
    ConfigurationError,
    ImageError,
    InvalidPercentError,
    LayoutError,
    PdfGridError,
    ReplayOverflowError,
    ResourceError,
    RowHeightError,
    TableShapeError,
)
from .core.models import (
    Align,
    BarcodeProps,
    Color,
    Extension,
    Font,
    FontFamily,
    FontStyle,
    Margins,
    Orientation,
    PageSize,
    Proportion,
    RectProps,
    TableProps,
    TextProps,
)
from .document import Document
from .qr.codec import QrConfig
from .render.grid import Column, Row
from .render.renderer import FpdfRenderer, Renderer

__all__ = [
    "Align",
    "BarcodeError",
    "BarcodeProportionError",
    "BarcodeProps",
    "Color",
    "Column",
    "ConfigurationError",
    "Document",
    "Extension",
    "Font",
    "FontFamily",
    "FontStyle",
    "FpdfRenderer",
    "ImageError",
    "InvalidPercentError",
    "LayoutError",
    "Margins",
    "Orientation",
    "PageSize",
    "PdfGridError",
    "Proportion",
    "QrConfig",
    "RectProps",
    "Renderer",
    "ReplayOverflowError",
    "ResourceError",
    "Row",
    "RowHeightError",
    "TableProps",
    "TableShapeError",
    "TextProps",
]
