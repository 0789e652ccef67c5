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

from ..core.errors import BarcodeProportionError, InvalidPercentError
from ..core.models import Proportion, Rect

# Allowed barcode height/width ratio (inclusive).
BARCODE_MIN_RATIO = 0.10
BARCODE_MAX_RATIO = 0.20

# Tolerance for ratio comparisons at the bounds
RATIO_EPSILON = 1e-9


def width_per_col(usable_width: float, count: int) -> float:
    if count <= 0:
        raise ValueError("column count must be positive")
    return usable_width / count


def column_x(origin_x: float, column_width: float, index: int) -> float:
    return origin_x + index * column_width


def center_correction(outer: float, inner: float) -> float:
    return (outer - inner) / 2.0


def validate_percent(percent: float) -> float:
    value = float(percent)
    if not 0.0 < value <= 100.0:
        raise InvalidPercentError(f"percent must be within (0, 100], got {percent}")
    return value


def validate_barcode_proportion(proportion: Proportion) -> float:
    """Return the height/width ratio, rejecting values outside [0.10, 0.20]."""
    if proportion.width <= 0 or proportion.height <= 0:
        raise BarcodeProportionError("barcode proportion width and height must be positive")
    ratio = proportion.height / proportion.width
    if ratio < BARCODE_MIN_RATIO - RATIO_EPSILON or ratio > BARCODE_MAX_RATIO + RATIO_EPSILON:
        raise BarcodeProportionError(
            f"barcode height must be 10%-20% of its width, got {ratio * 100:.2f}%"
        )
    return ratio


def scaled_size(
    intrinsic_w: float,
    intrinsic_h: float,
    column_width: float,
    row_height: float,
    percent: float,
) -> tuple[float, float]:
    if intrinsic_w <= 0 or intrinsic_h <= 0:
        raise ValueError("intrinsic size must be positive")
    scale = validate_percent(percent) / 100.0
    ratio = intrinsic_h / intrinsic_w

    # The limiting side comes from the shapes alone, before percent applies.
    if ratio > row_height / column_width:
        height = row_height * scale
        return height / ratio, height
    width = column_width * scale
    return width, width * ratio


def center_in_cell(
    intrinsic_w: float,
    intrinsic_h: float,
    *,
    column_width: float,
    row_height: float,
    column_index: int,
    percent: float,
    origin_x: float = 0.0,
    origin_y: float = 0.0,
) -> Rect:
    width, height = scaled_size(intrinsic_w, intrinsic_h, column_width, row_height, percent)
    x = column_x(origin_x, column_width, column_index) + center_correction(column_width, width)
    y = origin_y + center_correction(row_height, height)
    return Rect(x=x, y=y, width=width, height=height)


def anchored_in_cell(
    intrinsic_w: float,
    intrinsic_h: float,
    *,
    column_width: float,
    row_height: float,
    column_index: int,
    left: float,
    top: float,
    percent: float,
    origin_x: float = 0.0,
    origin_y: float = 0.0,
) -> Rect:
    width, height = scaled_size(intrinsic_w, intrinsic_h, column_width, row_height, percent)
    x = column_x(origin_x, column_width, column_index) + left
    y = origin_y + top
    return Rect(x=x, y=y, width=width, height=height)


__all__ = [
    "BARCODE_MAX_RATIO",
    "BARCODE_MIN_RATIO",
    "anchored_in_cell",
    "center_correction",
    "center_in_cell",
    "column_x",
    "scaled_size",
    "validate_barcode_proportion",
    "validate_percent",
    "width_per_col",
]
