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
import os
from contextlib import contextmanager, redirect_stderr, redirect_stdout
from pathlib import Path
from typing import Any
from unittest import mock

from PIL import Image

from pdfgrid.core.errors import ImageError
from pdfgrid.core.models import Color, Extension, Font, ImageHandle, Margins

# =============================================================================
# Test Constants
# =============================================================================

# A 100 x 200 page with 10 unit margins leaves an 80 x 180 content box.
FAKE_PAGE_SIZE = (100.0, 200.0)
FAKE_MARGINS = Margins(10.0, 10.0, 10.0, 10.0)
FAKE_IMAGE_SIZE = (40.0, 20.0)


# =============================================================================
# Environment Helpers
# =============================================================================


@contextmanager
def temp_env(overrides: dict[str, str], *, clear: bool = False):
    with mock.patch.dict(os.environ, overrides, clear=clear):
        yield


@contextmanager
def suppress_output():
    with redirect_stdout(io.StringIO()), redirect_stderr(io.StringIO()):
        yield


def png_bytes(width: int = 4, height: int = 2) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (width, height), (255, 0, 0)).save(buf, format="PNG")
    return buf.getvalue()


def write_png(path: Path, width: int = 4, height: int = 2) -> Path:
    path.write_bytes(png_bytes(width, height))
    return path


# =============================================================================
# Recording Renderer
# =============================================================================


class FakeRenderer:
    """In-memory renderer with a fixed-width metric.

    Every character is ``char_width`` units wide regardless of font, and a
    scale factor of 1 makes the line height equal to the font size. Drawing
    calls are recorded in ``calls`` as tuples.
    """

    def __init__(
        self,
        *,
        page_size: tuple[float, float] = FAKE_PAGE_SIZE,
        margins: Margins = FAKE_MARGINS,
        char_width: float = 1.0,
        scale_factor: float = 1.0,
        image_size: tuple[float, float] = FAKE_IMAGE_SIZE,
    ) -> None:
        self._page_size = page_size
        self._margins = margins
        self.char_width = char_width
        self._scale_factor = scale_factor
        self.image_size = image_size
        self.font = Font()
        self.text_color = Color.black()
        self.pages = 1
        self.calls: list[tuple[Any, ...]] = []
        self._images = 0

    @property
    def scale_factor(self) -> float:
        return self._scale_factor

    def measure_string_width(self, text: str) -> float:
        return len(text) * self.char_width

    def set_font(self, font: Font) -> None:
        self.font = font

    def get_font(self) -> Font:
        return self.font

    def set_text_color(self, color: Color) -> None:
        self.text_color = color

    def get_text_color(self) -> Color:
        return self.text_color

    def draw_text(self, x: float, y: float, text: str) -> None:
        self.calls.append(("text", x, y, text))

    def register_image(
        self,
        source: str | Path | bytes,
        format_hint: Extension | None = None,
    ) -> ImageHandle:
        if not isinstance(source, (bytes, bytearray)) and not Path(source).exists():
            raise ImageError(f"could not load {source}")
        self._images += 1
        width, height = self.image_size
        return ImageHandle(name=f"image-{self._images}", width=width, height=height)

    def draw_image(self, handle: ImageHandle, x: float, y: float, w: float, h: float) -> None:
        self.calls.append(("image", handle.name, x, y, w, h))

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.calls.append(("line", x1, y1, x2, y2))

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None:
        self.calls.append(("fill", x, y, w, h, color))

    def stroke_rect(self, x: float, y: float, w: float, h: float) -> None:
        self.calls.append(("stroke", x, y, w, h))

    def draw_barcode(self, code: str, x: float, y: float, w: float, h: float) -> None:
        self.calls.append(("barcode", code, x, y, w, h))

    def page_margins(self) -> Margins:
        return self._margins

    def set_page_margins(self, margins: Margins) -> None:
        self._margins = margins

    def page_size(self) -> tuple[float, float]:
        return self._page_size

    def add_page(self) -> None:
        self.pages += 1
        self.calls.append(("add_page",))

    def output(self) -> bytes:
        return f"%FAKE pages={self.pages}".encode("ascii")

    def texts(self) -> list[tuple[Any, ...]]:
        return [call for call in self.calls if call[0] == "text"]

    def kinds(self) -> list[str]:
        return [call[0] for call in self.calls]
