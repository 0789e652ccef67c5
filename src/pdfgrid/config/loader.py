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

import tomllib
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar

from ..core.models import Font, FontFamily, FontStyle, Margins, Orientation, PageSize
from ..qr.codec import ERROR_LEVELS, MODULE_SHAPES, QrConfig
from .installer import resolve_config_path

E = TypeVar("E", bound=Enum)

_FONT_STYLES = {
    "normal": FontStyle.NORMAL,
    "regular": FontStyle.NORMAL,
    "bold": FontStyle.BOLD,
    "italic": FontStyle.ITALIC,
    "bold_italic": FontStyle.BOLD_ITALIC,
    "bolditalic": FontStyle.BOLD_ITALIC,
}


@dataclass(frozen=True)
class PageConfig:
    size: PageSize = PageSize.A4
    orientation: Orientation = Orientation.PORTRAIT
    margins: Margins = field(default_factory=lambda: Margins(10.0, 10.0, 10.0, 10.0))


@dataclass(frozen=True)
class FontConfig:
    family: FontFamily = FontFamily.HELVETICA
    style: FontStyle = FontStyle.NORMAL
    size: float = 10.0

    @property
    def font(self) -> Font:
        return Font(family=self.family, style=self.style, size=self.size)


@dataclass(frozen=True)
class LayoutConfig:
    page: PageConfig
    font: FontConfig
    qr_config: QrConfig
    source_path: Path | None = None


def load_layout_config(path: str | Path | None = None) -> LayoutConfig:
    config_path = resolve_config_path(path)
    cfg = _load_toml(config_path)

    page_cfg = _get_dict(cfg, "page")
    margins_cfg = _get_dict(page_cfg, "margins")
    page = PageConfig(
        size=_parse_enum(page_cfg.get("size"), PageSize, "page.size", PageSize.A4),
        orientation=_parse_enum(
            page_cfg.get("orientation"),
            Orientation,
            "page.orientation",
            Orientation.PORTRAIT,
        ),
        margins=Margins(
            left=_parse_margin(margins_cfg, "left"),
            top=_parse_margin(margins_cfg, "top"),
            right=_parse_margin(margins_cfg, "right"),
            bottom=_parse_margin(margins_cfg, "bottom"),
        ),
    )

    font_cfg = _get_dict(cfg, "font")
    font = FontConfig(
        family=_parse_enum(
            font_cfg.get("family"), FontFamily, "font.family", FontFamily.HELVETICA
        ),
        style=_parse_font_style(font_cfg.get("style")),
        size=_parse_positive_number(font_cfg.get("size"), "font.size", 10.0),
    )

    return LayoutConfig(
        page=page,
        font=font,
        qr_config=build_qr_config(cfg),
        source_path=config_path,
    )


def build_qr_config(cfg: dict[str, Any]) -> QrConfig:
    qr_cfg = _get_dict(cfg, "qr")
    error = str(qr_cfg.get("error", "M")).strip().upper()
    if error not in ERROR_LEVELS:
        raise ValueError(f"qr.error must be one of {sorted(ERROR_LEVELS)}, got {error!r}")
    module_shape = str(qr_cfg.get("module_shape", "square")).strip().lower()
    if module_shape not in MODULE_SHAPES:
        raise ValueError(f"qr.module_shape must be one of {sorted(MODULE_SHAPES)}")
    scale = _parse_int_strict(qr_cfg.get("scale"), "qr.scale", 8)
    if scale <= 0:
        raise ValueError("qr.scale must be positive")
    border = _parse_int_strict(qr_cfg.get("border"), "qr.border", 1)
    if border < 0:
        raise ValueError("qr.border cannot be negative")
    return QrConfig(
        error=error,
        scale=scale,
        border=border,
        dark=_parse_color(qr_cfg.get("dark")),
        light=_parse_color(qr_cfg.get("light")),
        module_shape=module_shape,
        boost_error=_parse_bool(qr_cfg.get("boost_error"), default=True),
    )


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"config file not found: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"invalid TOML in {path}: {exc}") from exc


def _get_dict(cfg: dict[str, Any], key: str) -> dict[str, Any]:
    value = cfg.get(key, {})
    if not isinstance(value, dict):
        raise ValueError(f"{key} section must be a table")
    return value


def _parse_enum(value: object, enum_type: type[E], key: str, default: E) -> E:
    if value is None:
        return default
    text = str(value).strip()
    for member in enum_type:
        if member.value.lower() == text.lower() or member.name.lower() == text.lower():
            return member
    allowed = ", ".join(member.value for member in enum_type)
    raise ValueError(f"{key} must be one of {allowed}, got {value!r}")


def _parse_font_style(value: object) -> FontStyle:
    if value is None:
        return FontStyle.NORMAL
    text = str(value).strip().lower()
    if text in _FONT_STYLES:
        return _FONT_STYLES[text]
    for member in FontStyle:
        if member.value and member.value.lower() == text:
            return member
    raise ValueError(f"font.style must be one of {', '.join(_FONT_STYLES)}, got {value!r}")


def _parse_margin(cfg: dict[str, Any], side: str) -> float:
    value = _parse_number(cfg.get(side), f"page.margins.{side}", 10.0)
    if value < 0:
        raise ValueError(f"page.margins.{side} cannot be negative")
    return value


def _parse_positive_number(value: object, key: str, default: float) -> float:
    number = _parse_number(value, key, default)
    if number <= 0:
        raise ValueError(f"{key} must be positive")
    return number


def _parse_number(value: object, key: str, default: float) -> float:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key} must be a number")
    return float(value)


def _parse_int_strict(value: object, key: str, default: int) -> int:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer")
    return value


def _parse_bool(value: object, *, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    raise ValueError("boolean config values must be true or false")


def _parse_color(value: object) -> str | tuple[int, int, int] | tuple[int, int, int, int] | None:
    if value is None:
        return None
    if isinstance(value, str):
        text = value.strip()
        return text or None
    if isinstance(value, (list, tuple)) and len(value) in (3, 4):
        channels = tuple(int(item) for item in value)
        if any(not 0 <= item <= 255 for item in channels):
            raise ValueError("qr color channels must be between 0 and 255")
        return channels  # type: ignore[return-value]
    raise ValueError("qr colors must be a string or a list of 3 or 4 integers")
