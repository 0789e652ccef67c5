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

import io
import uuid
from pathlib import Path
from typing import Protocol

from fpdf import FPDF
from PIL import Image

from ..core.errors import BarcodeError, ImageError
from ..core.models import (
    Color,
    Extension,
    Font,
    FontFamily,
    ImageHandle,
    Margins,
    Orientation,
    PageSize,
)

DEFAULT_MARGIN_MM = 10.0

# FPDF.code39 paints each character as three wide elements of width w, six
# narrow elements of w/3 and a narrow gap, i.e. 16/3 w per character.
CODE39_CHAR_UNITS = 16.0 / 3.0
CODE39_ALPHABET = frozenset("0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ-. $/+%")

_FPDF_FAMILIES = {
    FontFamily.HELVETICA: "helvetica",
    FontFamily.ARIAL: "helvetica",
    FontFamily.COURIER: "courier",
    FontFamily.TIMES: "times",
}


class Renderer(Protocol):
    """Drawing capabilities the layout engine needs from a PDF backend.

    Coordinates are in user units (millimetres for ``FpdfRenderer``) with the
    origin at the top-left corner of the page. ``draw_text`` receives the top
    edge of the line box, not the baseline.
    """

    @property
    def scale_factor(self) -> float: ...

    def measure_string_width(self, text: str) -> float: ...

    def set_font(self, font: Font) -> None: ...

    def get_font(self) -> Font: ...

    def set_text_color(self, color: Color) -> None: ...

    def get_text_color(self) -> Color: ...

    def draw_text(self, x: float, y: float, text: str) -> None: ...

    def register_image(
        self,
        source: str | Path | bytes,
        format_hint: Extension | None = None,
    ) -> ImageHandle: ...

    def draw_image(self, handle: ImageHandle, x: float, y: float, w: float, h: float) -> None: ...

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None: ...

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None: ...

    def stroke_rect(self, x: float, y: float, w: float, h: float) -> None: ...

    def draw_barcode(self, code: str, x: float, y: float, w: float, h: float) -> None: ...

    def page_margins(self) -> Margins: ...

    def set_page_margins(self, margins: Margins) -> None: ...

    def page_size(self) -> tuple[float, float]: ...

    def add_page(self) -> None: ...

    def output(self) -> bytes: ...


class FpdfRenderer:
    def __init__(
        self,
        orientation: Orientation = Orientation.PORTRAIT,
        page_size: PageSize = PageSize.A4,
        *,
        margins: Margins | None = None,
        font: Font | None = None,
    ) -> None:
        self.pdf = FPDF(
            orientation="L" if orientation == Orientation.LANDSCAPE else "P",
            unit="mm",
            format=page_size.value,
        )
        margins = margins or Margins(
            DEFAULT_MARGIN_MM, DEFAULT_MARGIN_MM, DEFAULT_MARGIN_MM, DEFAULT_MARGIN_MM
        )
        self.set_page_margins(margins)
        self.pdf.add_page()
        self._font = Font()
        self.set_font(font or Font())
        self._text_color = Color.black()
        self.set_text_color(self._text_color)
        self._images: dict[str, Image.Image] = {}

    @property
    def scale_factor(self) -> float:
        return float(self.pdf.k)

    def measure_string_width(self, text: str) -> float:
        return float(self.pdf.get_string_width(_latin1(text)))

    def set_font(self, font: Font) -> None:
        self.pdf.set_font(_FPDF_FAMILIES[font.family], style=font.style.value, size=font.size)
        self._font = font

    def get_font(self) -> Font:
        return self._font

    def set_text_color(self, color: Color) -> None:
        self.pdf.set_text_color(*color.as_tuple())
        self._text_color = color

    def get_text_color(self) -> Color:
        return self._text_color

    def draw_text(self, x: float, y: float, text: str) -> None:
        # fpdf places text on its baseline; shift by the font height in user units.
        self.pdf.text(x, y + self.pdf.font_size, _latin1(text))

    def register_image(
        self,
        source: str | Path | bytes,
        format_hint: Extension | None = None,
    ) -> ImageHandle:
        try:
            if isinstance(source, (bytes, bytearray)):
                image = Image.open(io.BytesIO(source))
            else:
                image = Image.open(Path(source).expanduser())
            image.load()
        except OSError as exc:
            label = "image bytes" if isinstance(source, (bytes, bytearray)) else str(source)
            raise ImageError(f"could not load {label}: {exc}") from exc
        if format_hint is not None and not _format_matches(image.format, format_hint):
            raise ImageError(
                f"image data is {image.format or 'unknown'}, expected {format_hint.value}"
            )
        name = uuid.uuid4().hex
        self._images[name] = image
        width, height = image.size
        return ImageHandle(name=name, width=float(width), height=float(height))

    def draw_image(self, handle: ImageHandle, x: float, y: float, w: float, h: float) -> None:
        # Handles are single use; the decoded image is released once placed.
        image = self._images.pop(handle.name, None)
        if image is None:
            raise ImageError(f"image {handle.name} is not registered")
        self.pdf.image(image, x=x, y=y, w=w, h=h)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.pdf.line(x1, y1, x2, y2)

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None:
        self.pdf.set_fill_color(*color.as_tuple())
        self.pdf.rect(x, y, w, h, style="F")

    def stroke_rect(self, x: float, y: float, w: float, h: float) -> None:
        self.pdf.rect(x, y, w, h, style="D")

    def draw_barcode(self, code: str, x: float, y: float, w: float, h: float) -> None:
        normalized = code.upper()
        invalid = sorted(set(normalized) - CODE39_ALPHABET)
        if not normalized or invalid:
            raise BarcodeError(f"cannot encode {code!r} as Code 39 (invalid: {''.join(invalid)})")
        symbol = f"*{normalized}*"
        wide = w / (CODE39_CHAR_UNITS * len(symbol))
        self.pdf.code39(symbol, x, y, w=wide, h=h)

    def page_margins(self) -> Margins:
        return Margins(
            left=float(self.pdf.l_margin),
            top=float(self.pdf.t_margin),
            right=float(self.pdf.r_margin),
            bottom=float(self.pdf.b_margin),
        )

    def set_page_margins(self, margins: Margins) -> None:
        self.pdf.set_margins(margins.left, margins.top, margins.right)
        self.pdf.set_auto_page_break(False, margin=margins.bottom)

    def page_size(self) -> tuple[float, float]:
        return (float(self.pdf.w), float(self.pdf.h))

    def add_page(self) -> None:
        self.pdf.add_page()
        # A new page starts with the document defaults; restore the active state.
        self.set_font(self._font)
        self.set_text_color(self._text_color)

    def output(self) -> bytes:
        return bytes(self.pdf.output())


def _latin1(text: str) -> str:
    # Core PDF fonts only cover latin-1.
    return text.encode("latin-1", errors="replace").decode("latin-1")


def _format_matches(detected: str | None, hint: Extension) -> bool:
    if detected is None:
        return False
    expected = "JPEG" if hint in (Extension.JPG, Extension.JPEG) else hint.value.upper()
    return detected.upper() == expected


__all__ = [
    "CODE39_ALPHABET",
    "FpdfRenderer",
    "Renderer",
]
