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


class PdfGridError(ValueError):
    """Base class for every error raised while laying out a document."""


class ConfigurationError(PdfGridError):
    """A declaration is invalid for the current page or layout."""


class RowHeightError(ConfigurationError):
    pass


class TableShapeError(ConfigurationError):
    pass


class BarcodeProportionError(ConfigurationError):
    pass


class InvalidPercentError(ConfigurationError):
    pass


class ResourceError(PdfGridError):
    """An external resource (image file, bytes, barcode payload) is unusable."""


class ImageError(ResourceError):
    pass


class BarcodeError(ResourceError):
    pass


class LayoutError(PdfGridError):
    """The builder was driven in an order it cannot honour."""


class ReplayOverflowError(LayoutError):
    pass


__all__ = [
    "BarcodeError",
    "BarcodeProportionError",
    "ConfigurationError",
    "ImageError",
    "InvalidPercentError",
    "LayoutError",
    "PdfGridError",
    "ReplayOverflowError",
    "ResourceError",
    "RowHeightError",
    "TableShapeError",
]
