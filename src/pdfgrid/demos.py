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

"""Sample documents used by ``pdfgrid demo``."""

from __future__ import annotations

import base64
from collections.abc import Callable
from dataclasses import replace
from pathlib import Path

from .config.loader import LayoutConfig
from .core.models import (
    Align,
    BarcodeProps,
    Color,
    Font,
    FontFamily,
    FontStyle,
    Orientation,
    PageSize,
    Proportion,
    RectProps,
    TableProps,
    TextProps,
)
from .document import Document
from .render.grid import Column, Row
from .render.renderer import Renderer

PROJECT_URL = "https://pypi.org/project/pdfgrid/"
SHIPMENT_CODE = "PDFGRID-0001"

_CERTIFICATE_TEXT = (
    "This certifies that the holder completed the grid layout course, covering rows, "
    "columns, wrapped text, tables, images, QR codes and barcodes, and demonstrated "
    "the ability to keep headers and footers in place across page breaks."
)

_SMALL_HEADER = ["Origin", "Destination", "", "Cost"]
_SMALL_ROUTES = [
    ["Lisbon", "Porto", "", "EUR 20.00"],
    ["Madrid", "Valencia", "", "EUR 25.00"],
    ["Sao Jose do Vale do Rio Preto", "Osasco", "", "EUR 20.00"],
    ["Lyon", "Marseille", "", "EUR 5.00"],
    ["Berlin", "Hamburg", "", "EUR 100.00"],
    ["Vienna", "Graz", "", "EUR 200.00"],
    ["Rotterdam", "Amsterdam", "", "EUR 44.00"],
    ["Milan", "Turin", "", "EUR 56.00"],
    ["Seville", "Granada", "", "EUR 35.00"],
    ["Krakow", "Warsaw", "", "EUR 82.00"],
    ["Ghent", "Antwerp", "", "EUR 62.00"],
    ["Zurich", "Geneva", "", "EUR 21.00"],
    ["Brno", "Prague", "", "EUR 12.00"],
    ["Dublin", "Cork", "", "EUR 21.00"],
    ["Lisbon", "Faro", "", "EUR 31.00"],
    ["Bilbao", "San Sebastian", "", "EUR 42.00"],
    ["Nantes", "Rennes", "", "EUR 19.00"],
    ["Bologna", "Florence", "", "EUR 7.00"],
    ["Munich", "Stuttgart", "", "EUR 113.00"],
    ["Oslo", "Bergen", "", "EUR 198.00"],
    ["Gothenburg", "Malmo", "", "EUR 42.00"],
    ["Tallinn", "Tartu", "", "EUR 58.00"],
]

_MEDIUM_HEADER = ["Origin", "Destination", "Cost per hour"]
_MEDIUM_ROUTES = [
    ["Porto", "Braga", "EUR 2.10"],
    ["Lisbon", "Coimbra", "EUR 3.10"],
    ["Madrid", "Toledo", "EUR 4.20"],
    ["Lyon", "Grenoble", "EUR 1.90"],
    ["Berlin", "Potsdam", "EUR 0.70"],
    ["Vienna", "Linz", "EUR 11.30"],
    ["Amsterdam", "Utrecht", "EUR 19.80"],
    ["Milan", "Bergamo", "EUR 4.20"],
    ["Seville", "Cordoba", "EUR 5.80"],
    ["Warsaw", "Lodz", "EUR 3.90"],
    ["Antwerp", "Brussels", "EUR 7.70"],
    ["Geneva", "Lausanne", "EUR 6.40"],
    ["Prague", "Plzen", "EUR 2.00"],
    ["Cork", "Limerick", "EUR 1.80"],
]


def _new_document(
    config: LayoutConfig | None,
    orientation: Orientation,
    page_size: PageSize,
    renderer: Renderer | None,
) -> Document:
    if config is None:
        return Document(orientation, page_size, renderer=renderer)
    page = replace(config.page, orientation=orientation, size=page_size)
    return Document.from_config(replace(config, page=page), renderer=renderer)


def _image_or_text(image: Path | None, fallback: str, props: RectProps) -> Callable[[Column], None]:
    def draw(column: Column) -> None:
        if image is not None:
            column.image(image, props)
        else:
            column.text(fallback, TextProps(style=FontStyle.BOLD, align=Align.CENTER, top=8))

    return draw


def build_certificate(
    *,
    config: LayoutConfig | None = None,
    image: Path | None = None,
    renderer: Renderer | None = None,
) -> Document:
    page_size = config.page.size if config else PageSize.A4
    doc = _new_document(config, Orientation.LANDSCAPE, page_size, renderer)

    def heading(row: Row) -> None:
        row.col(_image_or_text(image, "pdfgrid", RectProps(center=True, percent=88)))
        row.col(
            lambda col: col.text(
                "Layout Certificate",
                TextProps(size=20, style=FontStyle.BOLD_ITALIC, align=Align.CENTER, top=12),
            )
        )
        row.col(_image_or_text(image, "pdfgrid", RectProps(center=True, percent=90)))

    doc.row(20, heading)
    doc.row(
        130,
        lambda row: row.col(
            lambda col: col.text(
                _CERTIFICATE_TEXT,
                TextProps(size=13, align=Align.CENTER, top=60, vertical_padding=2.0),
            )
        ),
    )

    def signatures(row: Row) -> None:
        for label in ("Course Lead", "Examiner", "Sign Here"):
            row.col(lambda col, label=label: col.signature(label))

    doc.row(25, signatures)
    return doc


def build_report(
    *,
    config: LayoutConfig | None = None,
    image: Path | None = None,
    renderer: Renderer | None = None,
) -> Document:
    page_size = config.page.size if config else PageSize.A4
    doc = _new_document(config, Orientation.PORTRAIT, page_size, renderer)
    encoded = base64.b64encode(image.read_bytes()).decode("ascii") if image else None

    def banner(row: Row) -> None:
        if encoded is not None and image is not None:
            row.col(
                lambda col: col.base64_image(
                    encoded, image.suffix, RectProps(center=True, percent=70)
                )
            )
        else:
            row.col_space()
        row.col_spaces(2)
        row.col(lambda col: col.qr_code(PROJECT_URL, RectProps(percent=75)))

        def barcode(col: Column) -> None:
            col.barcode(
                SHIPMENT_CODE,
                BarcodeProps(center=True, percent=75, proportion=Proportion(50, 10)),
            )
            col.text(SHIPMENT_CODE, TextProps(size=7, align=Align.CENTER, top=16))

        row.col(barcode)

    def title(row: Row) -> None:
        row.col(_image_or_text(image, "Report", RectProps(center=True)))
        row.col_space()

        def heading(col: Column) -> None:
            col.text("Packages Report: Daily", TextProps(top=4))
            col.text("Type: Small, Medium", TextProps(top=10))

        row.col(heading)
        row.col_space()
        row.col(
            lambda col: col.text(
                "20/07/1994", TextProps(style=FontStyle.BOLD_ITALIC, top=7.5)
            )
        )

    def summary(row: Row) -> None:
        def counts(col: Column) -> None:
            col.text(
                f"Small: {len(_SMALL_ROUTES)}, Medium: {len(_MEDIUM_ROUTES)}",
                TextProps(size=15, style=FontStyle.BOLD, align=Align.CENTER, top=9),
            )
            col.text("Europe / Routes", TextProps(size=12, align=Align.CENTER, top=17))

        row.col(counts)

    def header() -> None:
        doc.row(20, banner)
        doc.line(1.0)
        doc.row(12, title)
        doc.line(1.0)
        doc.row(22, summary)
        doc.line(1.0)

    def footer() -> None:
        def signatures(row: Row) -> None:
            courier = Font(family=FontFamily.COURIER, style=FontStyle.BOLD_ITALIC, size=9)
            row.col(lambda col: col.signature("Signature 1", courier))
            row.col(lambda col: col.signature("Signature 2"))
            row.col(lambda col: col.signature("Signature 3"))

        doc.row(40, signatures)

    doc.register_header(header)
    doc.register_footer(footer)

    doc.row(
        15,
        lambda row: row.col(
            lambda col: col.text("Small Packages", TextProps(style=FontStyle.BOLD, top=8))
        ),
    )
    doc.table_list(
        _SMALL_HEADER,
        _SMALL_ROUTES,
        TableProps(alternated_background=Color.parse("#c8c8c8")),
    )
    doc.row(
        15,
        lambda row: row.col(
            lambda col: col.text("Medium Packages", TextProps(style=FontStyle.BOLD, top=8))
        ),
    )
    doc.table_list(
        _MEDIUM_HEADER,
        _MEDIUM_ROUTES,
        TableProps(
            header_font=Font(family=FontFamily.COURIER, style=FontStyle.BOLD_ITALIC),
            content_font=Font(family=FontFamily.COURIER, style=FontStyle.ITALIC),
            align=Align.CENTER,
            line=True,
        ),
    )
    return doc


def build_label(
    *,
    config: LayoutConfig | None = None,
    image: Path | None = None,
    renderer: Renderer | None = None,
) -> Document:
    doc = _new_document(config, Orientation.PORTRAIT, PageSize.LETTER, renderer)

    def sender(row: Row) -> None:
        row.col(_image_or_text(image, "SHIP", RectProps(center=True, percent=80)))

        def company(col: Column) -> None:
            col.text(
                "pdfgrid International Shipping, Inc.",
                TextProps(size=20, top=15, extrapolate=True),
            )
            col.text("1000 Layout Avenue, Gridville GL 3691234", TextProps(size=12, top=21))

        row.col(company)
        row.col_space()

    def recipient(row: Row) -> None:
        row.col(
            lambda col: col.text(
                "Joana Sant'Ana, 100 Main Street, Springfield TN 39021, United States",
                TextProps(size=15, top=14),
            )
        )
        row.col_space()
        row.col(lambda col: col.qr_code(PROJECT_URL, RectProps(center=True, percent=75)))

    def barcode(row: Row) -> None:
        def draw(col: Column) -> None:
            col.barcode(SHIPMENT_CODE, BarcodeProps(center=True, percent=70))
            col.text(SHIPMENT_CODE, TextProps(size=20, align=Align.CENTER, top=80))

        row.col(draw)

    def routing(row: Row) -> None:
        row.col(
            lambda col: col.text(
                "CODE: 123412351645231245564 DATE: 20-07-1994 20:20:33",
                TextProps(size=15, top=19),
            )
        )
        row.col(lambda col: col.text("CA", TextProps(size=85, align=Align.CENTER, top=30)))

    doc.row(40, sender)
    doc.line(10)
    doc.row(40, recipient)
    doc.line(10)
    doc.row(100, barcode)
    doc.set_border(True)
    doc.row(40, routing)
    doc.set_border(False)
    return doc


DEMOS: dict[str, Callable[..., Document]] = {
    "certificate": build_certificate,
    "report": build_report,
    "label": build_label,
}


__all__ = ["DEMOS", "build_certificate", "build_label", "build_report"]
