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
import binascii
from pathlib import Path

from ..core.errors import ConfigurationError, ImageError, ResourceError
from ..core.models import (
    Align,
    BarcodeProps,
    Cell,
    Extension,
    Font,
    FontStyle,
    ImageHandle,
    Rect,
    RectProps,
    TextProps,
)
from ..qr.codec import QrConfig, qr_png
from .geometry import (
    anchored_in_cell,
    center_in_cell,
    validate_barcode_proportion,
    validate_percent,
)
from .renderer import Renderer
from .text import TextFlow

SIGNATURE_INSET = 4.0
SIGNATURE_LINE_RATIO = 1.33
SIGNATURE_LABEL_GAP = 2.0
DEFAULT_SIGNATURE_FONT = Font(style=FontStyle.BOLD, size=8.0)


def place_rect(
    intrinsic_w: float,
    intrinsic_h: float,
    cell: Cell,
    *,
    center: bool,
    left: float,
    top: float,
    percent: float,
) -> Rect:
    """Scale an intrinsic size into ``cell``, centred or anchored at (left, top)."""
    # Cells carry absolute coordinates, so the column index is already applied.
    if center:
        return center_in_cell(
            intrinsic_w,
            intrinsic_h,
            column_width=cell.width,
            row_height=cell.height,
            column_index=0,
            percent=percent,
            origin_x=cell.x,
            origin_y=cell.y,
        )
    return anchored_in_cell(
        intrinsic_w,
        intrinsic_h,
        column_width=cell.width,
        row_height=cell.height,
        column_index=0,
        left=left,
        top=top,
        percent=percent,
        origin_x=cell.x,
        origin_y=cell.y,
    )


def decode_base64_image(data: str) -> bytes:
    payload = data.strip()
    if payload.startswith("data:"):
        _, _, payload = payload.partition(",")
    payload = "".join(payload.split())
    if not payload:
        raise ImageError("base64 image data is empty")
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ImageError(f"malformed base64 image data: {exc}") from exc


def normalize_extension(extension: Extension | str) -> Extension:
    if isinstance(extension, Extension):
        return extension
    try:
        return Extension(str(extension).strip().lower().lstrip("."))
    except ValueError:
        allowed = ", ".join(item.value for item in Extension)
        raise ConfigurationError(
            f"unsupported image extension {extension!r} (allowed: {allowed})"
        ) from None


class MediaPlacer:
    def __init__(self, renderer: Renderer, text: TextFlow, qr_config: QrConfig) -> None:
        self.renderer = renderer
        self.text = text
        self.qr_config = qr_config

    def image(self, path: str | Path, cell: Cell, props: RectProps) -> Rect:
        validate_percent(props.percent)
        handle = self.renderer.register_image(path)
        return self._draw_image(handle, cell, props)

    def base64_image(
        self,
        data: str,
        extension: Extension | str,
        cell: Cell,
        props: RectProps,
    ) -> Rect:
        validate_percent(props.percent)
        hint = normalize_extension(extension)
        handle = self.renderer.register_image(decode_base64_image(data), hint)
        return self._draw_image(handle, cell, props)

    def qr_code(self, data: str | bytes, cell: Cell, props: RectProps) -> Rect:
        validate_percent(props.percent)
        try:
            png = qr_png(data, self.qr_config)
        except ValueError as exc:
            raise ResourceError(f"could not encode QR code: {exc}") from exc
        handle = self.renderer.register_image(png, Extension.PNG)
        return self._draw_image(handle, cell, props)

    def barcode(self, code: str, cell: Cell, props: BarcodeProps) -> Rect:
        validate_barcode_proportion(props.proportion)
        validate_percent(props.percent)
        rect = place_rect(
            props.proportion.width,
            props.proportion.height,
            cell,
            center=props.center,
            left=props.left,
            top=props.top,
            percent=props.percent,
        )
        self.renderer.draw_barcode(code, rect.x, rect.y, rect.width, rect.height)
        return rect

    def signature(self, label: str, cell: Cell, font: Font | None = None) -> None:
        line_y = cell.y + cell.height / SIGNATURE_LINE_RATIO
        self.renderer.draw_line(
            cell.x + SIGNATURE_INSET,
            line_y,
            cell.x + cell.width - SIGNATURE_INSET,
            line_y,
        )
        props = TextProps.from_font(
            font or DEFAULT_SIGNATURE_FONT,
            align=Align.CENTER,
            top=line_y - cell.y + SIGNATURE_LABEL_GAP,
        )
        self.text.render(label, props, cell)

    def _draw_image(self, handle: ImageHandle, cell: Cell, props: RectProps) -> Rect:
        rect = place_rect(
            handle.width,
            handle.height,
            cell,
            center=props.center,
            left=props.left,
            top=props.top,
            percent=props.percent,
        )
        self.renderer.draw_image(handle, rect.x, rect.y, rect.width, rect.height)
        return rect


__all__ = [
    "MediaPlacer",
    "decode_base64_image",
    "normalize_extension",
    "place_rect",
]
