#!/usr/bin/env python3
from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Any

import segno
from PIL import Image, ImageColor, ImageDraw

ColorValue = str | tuple[int, int, int] | tuple[int, int, int, int] | None
RGBA = tuple[int, int, int, int]

ERROR_LEVELS = frozenset({"L", "M", "Q", "H"})
MODULE_SHAPES = frozenset({"square", "rounded"})

# Corner radius of a rounded module, as a share of the module size.
ROUNDED_RATIO = 0.2

_BLACK: RGBA = (0, 0, 0, 255)
_WHITE: RGBA = (255, 255, 255, 255)


@dataclass(frozen=True)
class QrConfig:
    error: str = "M"
    scale: int = 8
    border: int = 1
    dark: ColorValue = None
    light: ColorValue = None
    module_shape: str = "square"
    boost_error: bool = True


def make_qr(data: bytes | str, *, error: str = "M", boost_error: bool = True) -> Any:
    level = error.strip().upper()
    if level not in ERROR_LEVELS:
        raise ValueError(f"unsupported QR error level: {error}")
    return segno.make(data, error=level, micro=False, boost_error=boost_error)


def qr_png(data: bytes | str, config: QrConfig | None = None) -> bytes:
    """Encode ``data`` as a QR symbol and return it as PNG bytes."""
    config = config or QrConfig()
    if not data:
        raise ValueError("QR payload cannot be empty")
    shape = config.module_shape.strip().lower()
    if shape not in MODULE_SHAPES:
        raise ValueError(f"unsupported module_shape: {config.module_shape}")

    symbol = make_qr(data, error=config.error, boost_error=config.boost_error)
    if shape == "rounded":
        return _rounded_png(symbol, config)
    buf = io.BytesIO()
    symbol.save(buf, kind="png", scale=config.scale, border=config.border, **_palette(config))
    return buf.getvalue()


def _palette(config: QrConfig) -> dict[str, ColorValue]:
    colors = {"dark": config.dark, "light": config.light}
    return {
        key: value.strip() if isinstance(value, str) else value
        for key, value in colors.items()
        if value is not None
    }


def _rgba(value: ColorValue, fallback: RGBA) -> RGBA:
    if value is None:
        return fallback
    if isinstance(value, str):
        text = value.strip()
        if not text or text.lower() in ("none", "transparent"):
            return fallback
        red, green, blue, alpha = ImageColor.getcolor(text, "RGBA")
        return (red, green, blue, alpha)
    channels = tuple(int(channel) for channel in value)
    if len(channels) == 3:
        return (channels[0], channels[1], channels[2], 255)
    return (channels[0], channels[1], channels[2], channels[3])


def _rounded_png(symbol: Any, config: QrConfig) -> bytes:
    scale = config.scale
    size = symbol.symbol_size(scale=scale, border=config.border)
    image = Image.new("RGBA", size, _rgba(config.light, _WHITE))
    draw = ImageDraw.Draw(image)
    dark = _rgba(config.dark, _BLACK)
    radius = ROUNDED_RATIO * scale

    for y, row in enumerate(symbol.matrix_iter(scale=1, border=config.border)):
        for x, module in enumerate(row):
            if module:
                left, top = x * scale, y * scale
                draw.rounded_rectangle(
                    (left, top, left + scale - 1, top + scale - 1), radius=radius, fill=dark
                )

    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


__all__ = ["ERROR_LEVELS", "MODULE_SHAPES", "QrConfig", "make_qr", "qr_png"]
